"""Local store layout: jailed path resolution and local skill records."""

from __future__ import annotations

from skillmem.store.local_skills import get_local_skill, list_local_skills
from skillmem.store.paths import (
    get_local_skill_path,
    get_repo_cache_path,
    resolve_skill_file,
    sanitize_path_segment,
    validate_local_path,
    validate_path_within_base,
)

__all__ = [
    "get_local_skill",
    "get_local_skill_path",
    "get_repo_cache_path",
    "list_local_skills",
    "resolve_skill_file",
    "sanitize_path_segment",
    "validate_local_path",
    "validate_path_within_base",
]
