"""Parsing of ``@skill/path`` references to files inside a local skill."""

from __future__ import annotations

from skillmem.constants.references import (
    NULL_BYTE,
    PATH_SEPARATOR,
    REF_SEPARATOR,
    REPEATED_SEPARATOR_PATTERN,
    SKILL_NAME_PATTERN,
    TRAVERSAL_TOKEN,
)
from skillmem.exceptions import InvalidReferenceError, PathTraversalError
from skillmem.types import SkillPathRef


def parse_skill_path_ref(raw: str, allow_empty_path: bool = False) -> SkillPathRef:
    """Parse ``@skill/path``.

    With ``allow_empty_path`` the forms ``@skill`` and ``@skill/`` target the
    whole skill and yield an empty ``file_path``.
    """
    trimmed = raw.strip()
    if not trimmed.startswith(REF_SEPARATOR):
        raise InvalidReferenceError(f"Invalid skill path reference: must start with '@'. Got: {raw}")

    body = trimmed[1:]
    skill_name, sep, file_path = body.partition(PATH_SEPARATOR)
    if not sep and not allow_empty_path:
        raise InvalidReferenceError(
            f"Invalid skill path reference: must include file path after skill name. Got: {raw}"
        )
    skill_name = skill_name.strip()
    file_path = file_path.strip()

    _validate_skill_segment(skill_name)

    if TRAVERSAL_TOKEN in file_path:
        raise PathTraversalError("Invalid path: traversal not allowed")
    if NULL_BYTE in file_path:
        raise PathTraversalError("Invalid skill path reference: null bytes not allowed")

    normalized = REPEATED_SEPARATOR_PATTERN.sub(PATH_SEPARATOR, file_path).strip(PATH_SEPARATOR)
    if not normalized and not allow_empty_path:
        raise InvalidReferenceError("Invalid skill path reference: file path cannot be empty")

    return SkillPathRef(skill_name=skill_name, file_path=normalized)


def _validate_skill_segment(skill_name: str) -> None:
    if not skill_name:
        raise InvalidReferenceError("Invalid skill path reference: skill name cannot be empty")
    if TRAVERSAL_TOKEN in skill_name or "\\" in skill_name:
        raise PathTraversalError("Invalid skill name: path traversal not allowed")
    if NULL_BYTE in skill_name:
        raise PathTraversalError("Invalid skill path reference: null bytes not allowed")
    if not SKILL_NAME_PATTERN.fullmatch(skill_name):
        raise InvalidReferenceError(
            "Invalid skill name: only alphanumeric characters, dashes, and underscores are allowed"
        )
