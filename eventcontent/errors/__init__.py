"""
Event content pipeline errors and exceptions.

This module contains all custom exceptions used throughout the system.
"""

from .base import ContentError, ConfigurationError
from .formatting import describe_validation_error
from .pipeline_errors import (
    PayloadError,
    RecordLoadError,
    ReferenceResolutionError,
    MissingTranslationError,
    MissingScheduleError,
    ScheduleMatchError,
    MissingDerivedEventError,
    StructuralDriftError,
    MaterializeError,
)

__all__ = [
    'ContentError',
    'ConfigurationError',
    'PayloadError',
    'RecordLoadError',
    'ReferenceResolutionError',
    'MissingTranslationError',
    'MissingScheduleError',
    'ScheduleMatchError',
    'MissingDerivedEventError',
    'StructuralDriftError',
    'MaterializeError',
    'describe_validation_error',
]
