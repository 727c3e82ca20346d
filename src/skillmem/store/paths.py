"""Map validated references to jailed paths under the store root.

Sanitization here is applied even to names that already passed the reference
grammar, so a caller that skips validation still cannot leave the store.
"""

from __future__ import annotations

import os
from pathlib import Path

from skillmem.config import StoreConfig
from skillmem.constants.references import NULL_BYTE, TRAVERSAL_TOKEN
from skillmem.constants.store import (
    SEGMENT_EDGE_PATTERN,
    SEGMENT_SEPARATOR_PATTERN,
    SEGMENT_SEPARATOR_REPLACEMENT,
)
from skillmem.exceptions import LocalPathError, PathTraversalError
from skillmem.types import GithubRepoRef


def sanitize_path_segment(segment: str) -> str:
    """Strip traversal tokens, edge dots/whitespace and separators from one path segment."""
    sanitized = segment.replace(NULL_BYTE, "")
    sanitized = sanitized.replace(TRAVERSAL_TOKEN, "")
    sanitized = SEGMENT_EDGE_PATTERN.sub("", sanitized)
    sanitized = SEGMENT_SEPARATOR_PATTERN.sub(SEGMENT_SEPARATOR_REPLACEMENT, sanitized)
    if not sanitized:
        raise PathTraversalError(f'Invalid path segment: "{segment}"')
    return sanitized


def validate_path_within_base(target: Path, base: Path) -> None:
    """Raise unless *target* resolves to *base* or one of its descendants."""
    resolved_target = Path(os.path.normpath(target)).resolve()
    resolved_base = Path(os.path.normpath(base)).resolve()
    if not resolved_target.is_relative_to(resolved_base):
        raise PathTraversalError("Path traversal attempt detected")


def get_repo_cache_path(config: StoreConfig, ref: GithubRepoRef) -> Path:
    """Return ``repos/<host>/<owner>/<repo>`` for a remote source."""
    cache_path = (
        config.repos_dir
        / sanitize_path_segment(ref.host)
        / sanitize_path_segment(ref.owner)
        / sanitize_path_segment(ref.repo)
    )
    validate_path_within_base(cache_path, config.repos_dir)
    return cache_path


def get_local_skill_path(config: StoreConfig, name: str) -> Path:
    """Return ``skills/<name>`` for a local skill."""
    skill_path = config.skills_dir / sanitize_path_segment(name)
    validate_path_within_base(skill_path, config.skills_dir)
    return skill_path


def resolve_skill_file(skill_dir: Path, relative_path: str) -> Path:
    """Return the path of *relative_path* inside *skill_dir*, refusing escapes."""
    target = skill_dir / relative_path if relative_path else skill_dir
    validate_path_within_base(target, skill_dir)
    return target


def validate_local_path(path: Path) -> None:
    """Check that a local source directory exists, is readable, and is a directory."""
    if not path.exists():
        raise LocalPathError(f"Path not found: {path}")
    if not os.access(path, os.R_OK):
        raise LocalPathError(f"Permission denied: {path}")
    if not path.is_dir():
        raise LocalPathError(f"Not a directory: {path}")
