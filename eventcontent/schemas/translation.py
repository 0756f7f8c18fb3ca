"""
Translation payload schemas (apply-translation wire format).

The payload mirrors the source dataset without language-tag nesting: every
text field already holds the target-language string.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .content import (
    ContentModel,
    EventTranslation,
    HowItWorksEntry,
    IntroCard,
    PlanSet,
)


class PeriodTranslation(ContentModel):
    start: str
    end: str
    label: str


class ScheduleTranslation(ContentModel):
    timezone_country: str
    timezone_id: str
    periods: List[PeriodTranslation]


class SectionsTranslation(ContentModel):
    intro: IntroCard
    how_it_works: List[HowItWorksEntry]
    plans: PlanSet


class SharedTranslation(ContentModel):
    schedules: Dict[str, ScheduleTranslation]
    intro: IntroCard
    how_it_works: List[HowItWorksEntry]
    plans: PlanSet

    def sections(self) -> SectionsTranslation:
        return SectionsTranslation(intro=self.intro, how_it_works=self.how_it_works, plans=self.plans)


class EventTranslationEntry(ContentModel):
    slug: str
    translations: EventTranslation
    sections: Optional[SectionsTranslation] = None


class TranslationBundle(ContentModel):
    """Reply payload produced from the exported source dataset."""

    shared: SharedTranslation
    events: List[EventTranslationEntry]


__all__ = [
    "PeriodTranslation",
    "ScheduleTranslation",
    "SectionsTranslation",
    "SharedTranslation",
    "EventTranslationEntry",
    "TranslationBundle",
]
