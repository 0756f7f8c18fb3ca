"""
Derived-record Renderer

Builds the derived-language shared record and one record per source event
from a validated, pruned translation payload. Everything is rendered in memory
before the derived directory is replaced, so a failure never leaves a partial
set of files behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..dataset.loader import event_record_name, shared_record_name
from ..dataset.references import shared_reference
from ..errors import MissingScheduleError, MissingTranslationError, StructuralDriftError
from ..schemas import (
    Bundle,
    EventContent,
    EventTranslationEntry,
    Schedule,
    SchedulePeriod,
    SharedContent,
    SharedTranslation,
    TranslationBundle,
)
from ..utils.file_io import dumps_json, replace_directory
from .schedule_matcher import find_schedule_key

logger = logging.getLogger(__name__)


def build_derived_shared(
    source_shared: SharedContent,
    translation: SharedTranslation,
    target_language: str,
) -> SharedContent:
    """
    Derived shared content: timing from source, labels and sections from the translation.

    Raises:
        MissingScheduleError: a source schedule key has no translated schedule
        StructuralDriftError: period count or start/end differ from source
    """
    schedules: Dict[str, Schedule] = {}
    for key, source in source_shared.schedules.items():
        translated = translation.schedules.get(key)
        if translated is None:
            raise MissingScheduleError(key)
        if len(source.periods) != len(translated.periods):
            raise StructuralDriftError(f'Schedule "{key}" period count mismatch', key=key)
        periods = []
        for period, translated_period in zip(source.periods, translated.periods):
            if period.start != translated_period.start or period.end != translated_period.end:
                raise StructuralDriftError(f'Schedule "{key}" periods must match exactly', key=key)
            periods.append(SchedulePeriod(
                start=period.start,
                end=period.end,
                label={target_language: translated_period.label},
            ))
        schedules[key] = Schedule(
            timezone_country=source.timezone_country,
            timezone_id=source.timezone_id,
            periods=periods,
        )
    return SharedContent(
        schedules=schedules,
        intro={target_language: translation.intro},
        how_it_works={target_language: translation.how_it_works},
        plans={target_language: translation.plans},
    )


def render_event_record(
    event: EventContent,
    entry: EventTranslationEntry,
    schedule_key: str,
    target_language: str,
) -> Dict[str, Any]:
    """Derived event record; sections without an override reference the shared record."""
    sections = entry.sections
    if sections is None:
        rendered_sections = {
            "intro": shared_reference("intro"),
            "howItWorks": shared_reference("howItWorks"),
            "plans": shared_reference("plans"),
        }
    else:
        rendered_sections = {
            "intro": {target_language: sections.intro.to_wire()},
            "howItWorks": {target_language: [item.to_wire() for item in sections.how_it_works]},
            "plans": {target_language: sections.plans.to_wire()},
        }
    return {
        "id": event.id,
        "slug": event.slug,
        "date": event.date,
        "primaryLanguage": event.primary_language,
        "schedule": shared_reference(f"schedules.{schedule_key}"),
        "translations": {target_language: entry.translations.to_wire()},
        "sections": rendered_sections,
    }


def render_derived_records(
    source: Bundle,
    translation: TranslationBundle,
    target_language: str,
) -> Dict[str, str]:
    """
    Render every derived record file.

    Returns:
        Mapping of file name -> file content, shared record first, events by id
    """
    shared = build_derived_shared(source.shared, translation.shared, target_language)
    files: Dict[str, str] = {shared_record_name(target_language): dumps_json(shared.to_wire())}

    entries = {entry.slug: entry for entry in translation.events}
    for event in source.events:
        entry = entries.get(event.slug)
        if entry is None:
            raise MissingTranslationError(event.slug)
        schedule_key = find_schedule_key(
            event.schedule, source.shared.schedules, source.language, slug=event.slug
        )
        record = render_event_record(event, entry, schedule_key, target_language)
        files[event_record_name(event.slug, target_language)] = dumps_json(record)

    known = {event.slug for event in source.events}
    for slug in entries:
        if slug not in known:
            logger.warning("Ignoring translation for unknown event slug %r", slug)
    return files


def write_derived_records(generated_dir: Path, files: Dict[str, str]) -> Path:
    """Replace the derived directory wholesale with ``files``."""
    replace_directory(generated_dir, files)
    logger.info("Wrote %d derived record(s) to %s", len(files), generated_dir)
    return generated_dir
