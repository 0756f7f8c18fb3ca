"""
Pipeline error taxonomy.

- Payload errors: malformed or schema-invalid translation input
- Referential errors: a slug, schedule key or schedule structure that cannot be resolved
- Structural-drift errors: derived content whose non-textual fields diverge from source
- Record/materialize errors: unreadable records and failed external build steps
"""

from typing import List, Optional

from .base import ContentError


class PayloadError(ContentError):
    """Translation payload could not be parsed or failed schema validation."""

    def __init__(self, message: str, issues: Optional[List[str]] = None):
        super().__init__(message, issues=issues or [])
        self.issues = issues or []


class RecordLoadError(ContentError):
    """A record file could not be read, resolved or validated."""

    def __init__(self, path, reason: str):
        super().__init__(f"Failed to load record {path}: {reason}", path=str(path))
        self.path = path
        self.reason = reason


class ReferenceResolutionError(ContentError):
    """An identifier known to one side of the pipeline has no counterpart."""


class MissingTranslationError(ReferenceResolutionError):
    def __init__(self, slug: str):
        super().__init__(f'Missing translation for event slug "{slug}"', slug=slug)
        self.slug = slug


class MissingScheduleError(ReferenceResolutionError):
    def __init__(self, key: str, side: str = "translated"):
        super().__init__(f'Missing {side} schedule for key "{key}"', key=key)
        self.key = key


class ScheduleMatchError(ReferenceResolutionError):
    def __init__(self, slug: Optional[str] = None):
        if slug is None:
            message = "Unable to match event schedule to shared schedule"
        else:
            message = f'Unable to match schedule of event "{slug}" to a shared schedule'
        super().__init__(message, slug=slug)
        self.slug = slug


class MissingDerivedEventError(ReferenceResolutionError):
    def __init__(self, slug: str):
        super().__init__(f'Missing derived event for slug "{slug}"', slug=slug)
        self.slug = slug


class StructuralDriftError(ContentError):
    """Derived content diverges from source content on a non-textual field."""


class MaterializeError(ContentError):
    """The source materialization (build) step failed or could not be invoked."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message, returncode=returncode)
        self.returncode = returncode
