"""Validation of bare local skill handles (``@name`` or ``name``)."""

from __future__ import annotations

from skillmem.constants.references import (
    NULL_BYTE,
    PATH_SEPARATOR,
    REF_SEPARATOR,
    RESERVED_NAMES,
    SKILL_NAME_PATTERN,
    TRAVERSAL_TOKEN,
)
from skillmem.exceptions import InvalidReferenceError, PathTraversalError


def parse_local_skill_name(raw: str) -> str:
    """Parse ``@name`` or ``name`` into a validated skill folder name."""
    name = raw.strip()
    name = name.removeprefix(REF_SEPARATOR).strip()
    validate_skill_name(name)
    return name


def validate_skill_name(name: str) -> None:
    """Raise unless *name* is a safe skill folder name (``[A-Za-z0-9_-]+``)."""
    if not name or not name.strip():
        raise InvalidReferenceError("Invalid skill name: name cannot be empty")

    if TRAVERSAL_TOKEN in name or PATH_SEPARATOR in name or "\\" in name:
        raise PathTraversalError("Invalid skill name: path traversal not allowed")

    if name in RESERVED_NAMES:
        raise InvalidReferenceError("Invalid skill name: reserved name")

    if NULL_BYTE in name:
        raise PathTraversalError("Invalid skill name: null bytes not allowed")

    if not SKILL_NAME_PATTERN.fullmatch(name):
        raise InvalidReferenceError(
            "Invalid skill name: only alphanumeric characters, dashes, and underscores are allowed"
        )


def is_valid_skill_name(name: str) -> bool:
    """Return True when *name* passes ``validate_skill_name``."""
    try:
        validate_skill_name(name)
    except InvalidReferenceError:
        return False
    return True
