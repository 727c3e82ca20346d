"""Reference grammar: parse user-supplied addresses into structured references."""

from __future__ import annotations

from skillmem.references.names import is_valid_skill_name, parse_local_skill_name, validate_skill_name
from skillmem.references.repo import (
    build_clone_url,
    build_full_ref,
    format_repo_ref,
    parse_repo_reference,
    parse_skill_reference,
)
from skillmem.references.skill_path import parse_skill_path_ref

__all__ = [
    "build_clone_url",
    "build_full_ref",
    "format_repo_ref",
    "is_valid_skill_name",
    "parse_local_skill_name",
    "parse_repo_reference",
    "parse_skill_path_ref",
    "parse_skill_reference",
    "validate_skill_name",
]
