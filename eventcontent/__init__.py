"""
Bilingual event content pipeline.

Loads the canonical source-language records, applies a translated payload to
regenerate the derived-language records, and merges both into one dataset.
"""

from .config.settings import Settings, get_settings
from .dataset.materializer import CommandMaterializer, CopyMaterializer, SourceMaterializer
from .errors import ContentError
from .services.dataset_service import DatasetService

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "SourceMaterializer",
    "CopyMaterializer",
    "CommandMaterializer",
    "ContentError",
    "DatasetService",
]
