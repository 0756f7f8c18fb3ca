"""
Centralized schema definitions for event content.

This module contains:
- Pydantic models for source, derived and merged records
- The apply-translation payload schema
"""

from .content import (
    ContentModel,
    Localized,
    IntroCard,
    HowItWorksEntry,
    Plan,
    PlanSet,
    EventTranslation,
    SchedulePeriod,
    Schedule,
    Sections,
    SharedContent,
    EventContent,
)

from .translation import (
    PeriodTranslation,
    ScheduleTranslation,
    SectionsTranslation,
    SharedTranslation,
    EventTranslationEntry,
    TranslationBundle,
)

from .bundle import Bundle, MergedBundle

__all__ = [
    # Content
    "ContentModel",
    "Localized",
    "IntroCard",
    "HowItWorksEntry",
    "Plan",
    "PlanSet",
    "EventTranslation",
    "SchedulePeriod",
    "Schedule",
    "Sections",
    "SharedContent",
    "EventContent",
    # Translation payload
    "PeriodTranslation",
    "ScheduleTranslation",
    "SectionsTranslation",
    "SharedTranslation",
    "EventTranslationEntry",
    "TranslationBundle",
    # Bundles
    "Bundle",
    "MergedBundle",
]
