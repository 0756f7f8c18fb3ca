from .loader import (
    load_bundle,
    load_source_bundle,
    load_derived_bundle,
    discover_event_records,
    shared_record_name,
    event_record_name,
    sanitize_slug,
)
from .materializer import (
    BuildRequest,
    SourceMaterializer,
    CopyMaterializer,
    CommandMaterializer,
    materialized_workspace,
)
from .references import shared_reference, resolve_references

__all__ = [
    "load_bundle",
    "load_source_bundle",
    "load_derived_bundle",
    "discover_event_records",
    "shared_record_name",
    "event_record_name",
    "sanitize_slug",
    "BuildRequest",
    "SourceMaterializer",
    "CopyMaterializer",
    "CommandMaterializer",
    "materialized_workspace",
    "shared_reference",
    "resolve_references",
]
