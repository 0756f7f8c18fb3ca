"""
Merge Engine

Cross-validates the source-language bundle against the derived-language bundle
and produces the bilingual dataset. The source bundle owns every non-textual
field; the derived bundle only contributes text.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from ..errors import MissingDerivedEventError, MissingScheduleError, StructuralDriftError
from ..schemas import Bundle, EventContent, MergedBundle, Schedule, SchedulePeriod, Sections
from ..translation.schedule_matcher import find_schedule_key

logger = logging.getLogger(__name__)


def merge_schedules(
    source: Schedule,
    derived: Schedule,
    source_language: str,
    target_language: str,
) -> Schedule:
    if (
        source.timezone_country != derived.timezone_country
        or source.timezone_id != derived.timezone_id
    ):
        raise StructuralDriftError("Schedule timezone mismatch")
    if len(source.periods) != len(derived.periods):
        raise StructuralDriftError("Schedule period count mismatch")

    periods: List[SchedulePeriod] = []
    for period, translated in zip(source.periods, derived.periods):
        if period.start != translated.start or period.end != translated.end:
            raise StructuralDriftError("Schedule periods must match start/end times")
        periods.append(SchedulePeriod(
            start=period.start,
            end=period.end,
            label={
                source_language: period.label[source_language],
                target_language: translated.label[target_language],
            },
        ))
    return Schedule(
        timezone_country=source.timezone_country,
        timezone_id=source.timezone_id,
        periods=periods,
    )


def merge_sections(
    source: Sections,
    derived: Sections,
    source_language: str,
    target_language: str,
) -> Sections:
    return Sections(
        intro={
            source_language: source.intro[source_language],
            target_language: derived.intro[target_language],
        },
        how_it_works={
            source_language: source.how_it_works[source_language],
            target_language: derived.how_it_works[target_language],
        },
        plans={
            source_language: source.plans[source_language],
            target_language: derived.plans[target_language],
        },
    )


def _check_event_fields(event: EventContent, translated: EventContent) -> None:
    for field in ("id", "date", "primary_language"):
        if getattr(event, field) != getattr(translated, field):
            raise StructuralDriftError(
                f'Derived event "{event.slug}" {field} does not match source',
                slug=event.slug,
                field=field,
            )


def merge_event(
    event: EventContent,
    translated: EventContent,
    source: Bundle,
    derived: Bundle,
) -> EventContent:
    """Merge one source event with its derived counterpart."""
    source_language, target_language = source.language, derived.language
    _check_event_fields(event, translated)

    schedule_key = find_schedule_key(
        event.schedule, source.shared.schedules, source_language, slug=event.slug
    )
    derived_schedule = derived.shared.schedules.get(schedule_key)
    if derived_schedule is None:
        raise MissingScheduleError(schedule_key, side="derived")

    return EventContent(
        id=event.id,
        slug=event.slug,
        date=event.date,
        primary_language=event.primary_language,
        schedule=merge_schedules(event.schedule, derived_schedule, source_language, target_language),
        translations={
            source_language: event.translations[source_language],
            target_language: translated.translations[target_language],
        },
        sections=merge_sections(event.sections, translated.sections, source_language, target_language),
    )


def merge_bundles(source: Bundle, derived: Bundle) -> MergedBundle:
    """
    Produce the bilingual dataset.

    Raises:
        MissingDerivedEventError: a source event has no derived counterpart
        MissingScheduleError: the derived shared record lacks a schedule key
        ScheduleMatchError: a source event schedule matches no shared schedule
        StructuralDriftError: timing, counts, ids or dates diverge
    """
    derived_by_slug: Dict[str, EventContent] = {event.slug: event for event in derived.events}

    merged: List[EventContent] = []
    for event in source.events:
        translated = derived_by_slug.get(event.slug)
        if translated is None:
            raise MissingDerivedEventError(event.slug)
        merged.append(merge_event(event, translated, source, derived))

    merged.sort(key=lambda event: event.id)
    logger.info("Merged %d event(s) in %s+%s", len(merged), source.language, derived.language)
    return MergedBundle(events=merged)
