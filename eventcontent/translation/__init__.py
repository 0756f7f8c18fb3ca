"""
Translation components: schedule matching, payload normalization and
derived-record rendering.
"""

from .schedule_matcher import find_schedule_key, schedules_match
from .normalizer import (
    build_instructions,
    export_dataset,
    deep_equal,
    parse_translation_payload,
    prune_shared_sections,
    normalize_translation_payload,
)
from .renderer import (
    build_derived_shared,
    render_event_record,
    render_derived_records,
    write_derived_records,
)

__all__ = [
    "find_schedule_key",
    "schedules_match",
    "build_instructions",
    "export_dataset",
    "deep_equal",
    "parse_translation_payload",
    "prune_shared_sections",
    "normalize_translation_payload",
    "build_derived_shared",
    "render_event_record",
    "render_derived_records",
    "write_derived_records",
]
