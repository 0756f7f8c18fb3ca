"""
Content model for event records and shared content.

This module defines:
- Un-localized building blocks (intro card, how-it-works entry, plans)
- Localized record shapes (schedule, sections, event, shared content)

Localized fields are mappings of language tag -> value. The languages a
record must carry are passed through the validation context, e.g.
``EventContent.model_validate(data, context={"languages": ("pt",)})``.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Sequence, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationInfo
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base for all content shapes: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Dump with wire aliases, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def require_languages(value: Dict[str, Any], info: ValidationInfo) -> Dict[str, Any]:
    """Ensure a localized mapping carries every language named in the context."""
    languages: Sequence[str] = (info.context or {}).get("languages") or ()
    missing = [language for language in languages if language not in value]
    if missing:
        raise ValueError(f"missing language(s): {', '.join(missing)}")
    return value


T = TypeVar("T")

# language tag -> value, checked against the languages in the validation context
Localized = Annotated[Dict[str, T], AfterValidator(require_languages)]


# --------------------
# Un-localized building blocks
# --------------------
class IntroCard(ContentModel):
    title: str
    items: List[str]


class HowItWorksEntry(ContentModel):
    title: str
    items: List[str]


class Plan(ContentModel):
    name: str
    price: str
    note: str
    cta: str
    button: str = Field(..., description="Style token, not free text")
    badge: Optional[str] = None
    features: List[str]


class PlanSet(ContentModel):
    primary: List[Plan]
    diamond: List[Plan]


class EventTranslation(ContentModel):
    title: str
    subtitle: str
    summary: str
    location: str
    hero_cta_label: str
    secondary_cta_label: str


# --------------------
# Localized shapes
# --------------------
class SchedulePeriod(ContentModel):
    start: str
    end: str
    label: Localized[str]


class Schedule(ContentModel):
    timezone_country: str
    timezone_id: str
    periods: List[SchedulePeriod]


class Sections(ContentModel):
    intro: Localized[IntroCard]
    how_it_works: Localized[List[HowItWorksEntry]]
    plans: Localized[PlanSet]


class SharedContent(ContentModel):
    """Schedules and sections shared by every event of one language."""

    schedules: Dict[str, Schedule]
    intro: Localized[IntroCard]
    how_it_works: Localized[List[HowItWorksEntry]]
    plans: Localized[PlanSet]

    def sections(self) -> Sections:
        """Shared sections in the shape an event record carries them."""
        return Sections(intro=self.intro, how_it_works=self.how_it_works, plans=self.plans)


class EventContent(ContentModel):
    id: int
    slug: str
    date: str
    primary_language: str
    schedule: Schedule
    translations: Localized[EventTranslation]
    sections: Sections


__all__ = [
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
    "require_languages",
]
