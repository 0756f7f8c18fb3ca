"""
Shared references inside record files.

An event record may stand in for any value with ``{"$shared": "<dotted path>"}``,
pointing into the shared record of the same language, e.g.
``{"$shared": "schedules.br"}`` or ``{"$shared": "intro"}``.
"""

import copy
from typing import Any, Dict

REFERENCE_KEY = "$shared"


class UnresolvedReference(LookupError):
    """A ``$shared`` path does not exist in the shared record."""


def shared_reference(path: str) -> Dict[str, str]:
    return {REFERENCE_KEY: path}


def is_reference(value: Any) -> bool:
    return isinstance(value, dict) and set(value) == {REFERENCE_KEY}


def lookup(shared: Dict[str, Any], path: str) -> Any:
    # "<top-level key>[.<entry key>]"; entry keys may themselves contain dots
    node: Any = shared
    for part in path.split(".", 1):
        if not isinstance(node, dict) or part not in node:
            raise UnresolvedReference(f'unknown shared reference "{path}"')
        node = node[part]
    return node


def resolve_references(value: Any, shared: Dict[str, Any]) -> Any:
    """Return a copy of ``value`` with every shared reference replaced by its target."""
    if is_reference(value):
        path = value[REFERENCE_KEY]
        if not isinstance(path, str):
            raise UnresolvedReference(f"shared reference must be a string, got {path!r}")
        return copy.deepcopy(lookup(shared, path))
    if isinstance(value, dict):
        return {key: resolve_references(item, shared) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_references(item, shared) for item in value]
    return value
