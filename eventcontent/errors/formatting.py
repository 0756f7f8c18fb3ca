"""Helpers turning pydantic validation failures into field-path messages."""

from typing import List

from pydantic import ValidationError


def describe_validation_error(error: ValidationError, root: str = "payload") -> List[str]:
    """
    Return one ``<field path>: <reason>`` line per violation.

    Args:
        error: The pydantic ValidationError
        root: Name used when a violation has no field path (top-level shape)
    """
    issues = []
    for err in error.errors():
        path = ".".join(str(part) for part in err["loc"]) or root
        issues.append(f"{path}: {err['msg']}")
    return issues
