"""
Dataset Loader

Discovers and deserializes one language's record set:

    <records_dir>/shared.<lang>.json
    <records_dir>/event_<slug>.<lang>.json

Event records are validated against the content model and returned sorted by
numeric id, so downstream output never depends on directory enumeration order.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import RecordLoadError, describe_validation_error
from ..schemas import Bundle, EventContent, SharedContent
from ..utils.file_io import read_json
from .references import UnresolvedReference, resolve_references

logger = logging.getLogger(__name__)

SECTION_KEYS = ("intro", "howItWorks", "plans")

M = TypeVar("M", bound=BaseModel)


def shared_record_name(language: str) -> str:
    return f"shared.{language}.json"


def event_record_name(slug: str, language: str) -> str:
    return f"event_{sanitize_slug(slug)}.{language}.json"


def sanitize_slug(slug: str) -> str:
    return re.sub(r"[^A-Za-z0-9_-]", "-", slug)


def _event_pattern(language: str) -> "re.Pattern[str]":
    return re.compile(rf"^event_.+\.{re.escape(language)}\.json$")


def discover_event_records(records_dir: Path, language: str) -> List[Path]:
    """Event record files for ``language`` directly inside ``records_dir``."""
    pattern = _event_pattern(language)
    return sorted(
        path for path in records_dir.iterdir()
        if path.is_file() and pattern.match(path.name)
    )


def _read_record(path: Path) -> Dict[str, Any]:
    try:
        data = read_json(path)
    except json.JSONDecodeError as e:
        raise RecordLoadError(path, f"invalid JSON ({e})") from e
    except OSError as e:
        raise RecordLoadError(path, str(e)) from e
    if not isinstance(data, dict):
        raise RecordLoadError(path, "record must be a JSON object")
    return data


def _validate(model: Type[M], data: Dict[str, Any], path: Path, language: str) -> M:
    try:
        return model.model_validate(data, context={"languages": (language,)})
    except ValidationError as e:
        raise RecordLoadError(path, "; ".join(describe_validation_error(e, root="record"))) from e


def _check_unique_schedules(shared: SharedContent, path: Path) -> None:
    seen: Dict[str, str] = {}
    for key, schedule in shared.schedules.items():
        fingerprint = schedule.model_dump_json()
        if fingerprint in seen:
            raise RecordLoadError(
                path, f'schedules "{seen[fingerprint]}" and "{key}" are structurally identical'
            )
        seen[fingerprint] = key


def load_shared(
    records_dir: Path,
    language: str,
    check_unique_schedules: bool = True,
) -> Tuple[Dict[str, Any], SharedContent]:
    """Load the shared record, returning both its raw JSON and the validated model."""
    path = records_dir / shared_record_name(language)
    if not path.is_file():
        raise RecordLoadError(path, "shared record not found")
    raw = _read_record(path)
    shared = _validate(SharedContent, raw, path, language)
    if check_unique_schedules:
        _check_unique_schedules(shared, path)
    return raw, shared


def load_event(path: Path, raw_shared: Dict[str, Any], language: str) -> EventContent:
    raw = _read_record(path)
    try:
        resolved = resolve_references(raw, raw_shared)
    except UnresolvedReference as e:
        raise RecordLoadError(path, str(e)) from e

    # absent sections fall back to the shared content of the same language
    if resolved.get("sections") is None:
        resolved["sections"] = {}
    sections = resolved["sections"]
    if isinstance(sections, dict):
        for key in SECTION_KEYS:
            if key not in sections and key in raw_shared:
                sections[key] = raw_shared[key]
    return _validate(EventContent, resolved, path, language)


def load_bundle(records_dir: Path, language: str, check_unique_schedules: bool = True) -> Bundle:
    """
    Load the shared record and every event record of one language.

    Args:
        records_dir: Directory holding the language's records
        language: Language tag used in file names and localized fields
        check_unique_schedules: Reject shared schedules that are structurally identical

    Returns:
        Bundle with events sorted ascending by id

    Raises:
        RecordLoadError: naming the offending file on any failure
    """
    records_dir = Path(records_dir)
    if not records_dir.is_dir():
        raise RecordLoadError(records_dir, "record directory not found")

    raw_shared, shared = load_shared(records_dir, language, check_unique_schedules)

    events: List[EventContent] = []
    ids: Dict[int, Path] = {}
    slugs: Dict[str, Path] = {}
    for path in discover_event_records(records_dir, language):
        event = load_event(path, raw_shared, language)
        if event.id in ids:
            raise RecordLoadError(path, f"duplicate event id {event.id} (also in {ids[event.id].name})")
        if event.slug in slugs:
            raise RecordLoadError(path, f'duplicate event slug "{event.slug}" (also in {slugs[event.slug].name})')
        ids[event.id] = path
        slugs[event.slug] = path
        logger.debug("Loaded %s event %s from %s", language, event.slug, path.name)
        events.append(event)

    events.sort(key=lambda event: event.id)
    logger.info("Loaded %d %s event record(s) from %s", len(events), language, records_dir)
    return Bundle(language=language, shared=shared, events=events)


def load_source_bundle(events_dir: Path, language: str) -> Bundle:
    return load_bundle(events_dir, language, check_unique_schedules=True)


def load_derived_bundle(generated_dir: Path, language: str) -> Bundle:
    # schedule keys are only ever matched against the source schedules
    return load_bundle(generated_dir, language, check_unique_schedules=False)
