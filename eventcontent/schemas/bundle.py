"""Loaded (single-language) and merged (bilingual) bundle shapes."""

from __future__ import annotations

from typing import Any, Dict, List

from .content import ContentModel, EventContent, SharedContent


class Bundle(ContentModel):
    """All records of one language: the shared record plus events sorted by id."""

    language: str
    shared: SharedContent
    events: List[EventContent]

    def to_wire(self) -> Dict[str, Any]:
        return {
            "shared": self.shared.to_wire(),
            "events": [event.to_wire() for event in self.events],
        }


class MergedBundle(ContentModel):
    """Terminal artifact: one record per event carrying both languages."""

    events: List[EventContent]


__all__ = ["Bundle", "MergedBundle"]
