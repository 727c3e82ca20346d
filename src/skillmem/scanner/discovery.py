"""File discovery and skill metadata extraction for source trees."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from skillmem.constants.discovery import (
    DESCRIPTION_FALLBACK,
    DESCRIPTION_MAX_LENGTH,
    SKILL_MARKDOWN_FILENAME,
    SKIPPED_DIRECTORIES,
)
from skillmem.constants.parsing import HEADING_PREFIX
from skillmem.parsers import body_after_frontmatter, extract_frontmatter, frontmatter_string
from skillmem.references import build_full_ref
from skillmem.types import RepoRef, SkillInfo

logger = logging.getLogger(__name__)


def find_skill_files(root: Path) -> list[Path]:
    """Recursively collect SKILL.md files, skipping VCS metadata and dependency caches."""
    discovered: list[Path] = []
    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in SKIPPED_DIRECTORIES)
        if SKILL_MARKDOWN_FILENAME in filenames:
            discovered.append(Path(current) / SKILL_MARKDOWN_FILENAME)
    return discovered


def parse_skill_info(manifest: Path, base_dir: Path, repo_ref: RepoRef) -> SkillInfo:
    """Read one manifest and resolve its name, description and fully-qualified reference."""
    content = manifest.read_text(encoding="utf-8")
    frontmatter = extract_frontmatter(content)
    skill_dir = manifest.parent

    name = frontmatter_string(frontmatter, "name")
    if not name or not name.strip():
        name = skill_dir.name

    description = frontmatter_string(frontmatter, "description")
    if description is None:
        description = _first_body_line(body_after_frontmatter(content))

    return SkillInfo(
        name=name,
        description=description,
        path=_relative_posix(skill_dir, base_dir),
        full_ref=build_full_ref(repo_ref, name),
    )


def parse_all_skills(root: Path, repo_ref: RepoRef) -> list[SkillInfo]:
    """Discover and parse every skill under *root*; unreadable manifests are skipped."""
    skills: list[SkillInfo] = []
    for manifest in find_skill_files(root):
        try:
            skills.append(parse_skill_info(manifest, root, repo_ref))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not parse %s: %s", manifest, exc)
    return skills


def find_skill_by_name(root: Path, skill_name: str, repo_ref: RepoRef) -> Path | None:
    """Return the directory of the first skill whose resolved name is *skill_name*."""
    for manifest in find_skill_files(root):
        try:
            skill = parse_skill_info(manifest, root, repo_ref)
        except (OSError, UnicodeDecodeError):
            continue
        if skill.name == skill_name:
            return manifest.parent
    return None


def _first_body_line(body: str) -> str:
    for line in body.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith(HEADING_PREFIX):
            return stripped[:DESCRIPTION_MAX_LENGTH]
    return DESCRIPTION_FALLBACK


def _relative_posix(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
