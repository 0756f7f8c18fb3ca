"""
Translation Normalizer

Export side: turn the source bundle into a translation request (dataset +
fixed instructions). Apply side: parse and validate a reply payload, then drop
per-event section overrides that merely repeat the shared sections.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from pydantic import BaseModel, ValidationError

from ..errors import PayloadError, describe_validation_error
from ..schemas import Bundle, TranslationBundle

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {
    "pt": "Portuguese",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
}


def language_name(tag: str) -> str:
    return LANGUAGE_NAMES.get(tag.split("-", 1)[0].lower(), tag)


def build_instructions(source_language: str, target_language: str) -> str:
    source = language_name(source_language)
    target = language_name(target_language)
    return " ".join([
        f"Translate every {source} string to {target}.",
        f"Return JSON with the structure {{ shared: {{...}}, events: [...] }} matching the {source} data.",
        f"Do not nest {source} keys ({source_language}) inside the {target} payload; "
        f"every field under shared/events must contain the already translated {target} string.",
        "Keep numeric values, slugs, IDs, and schedule periods unchanged.",
    ])


def export_dataset(bundle: Bundle, target_language: str) -> Dict[str, Any]:
    """Translation request for ``bundle``: ``{instructions, dataset}``."""
    return {
        "instructions": build_instructions(bundle.language, target_language),
        "dataset": bundle.to_wire(),
    }


def deep_equal(a: BaseModel, b: BaseModel) -> bool:
    """Structural, order-sensitive comparison of two parsed models."""
    return type(a) is type(b) and a.model_dump() == b.model_dump()


def parse_translation_payload(payload: str) -> TranslationBundle:
    """
    Parse and validate a serialized translation payload.

    Raises:
        PayloadError: on empty input, invalid JSON, or any schema violation
            (every violation is listed as ``<field path>: <reason>``)
    """
    if not payload or not payload.strip():
        raise PayloadError("Translation input is empty")
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise PayloadError("Translation payload must be valid JSON") from e
    try:
        return TranslationBundle.model_validate(data)
    except ValidationError as e:
        issues = describe_validation_error(e)
        raise PayloadError(f"Invalid translation payload: {'; '.join(issues)}", issues=issues) from e


def prune_shared_sections(bundle: TranslationBundle) -> TranslationBundle:
    """Return a copy where sections equal to the shared sections are removed."""
    shared_sections = bundle.shared.sections()
    pruned = bundle.model_copy(deep=True)
    for entry in pruned.events:
        if entry.sections is not None and deep_equal(entry.sections, shared_sections):
            logger.debug("Event %s repeats shared sections; using shared references", entry.slug)
            entry.sections = None
    return pruned


def normalize_translation_payload(payload: str) -> TranslationBundle:
    """Parse, validate and prune a payload; the result is applied as one unit."""
    return prune_shared_sections(parse_translation_payload(payload))
