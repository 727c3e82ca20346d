"""Local skill records read from the skills directory."""

from __future__ import annotations

import logging
from pathlib import Path

from skillmem.config import StoreConfig
from skillmem.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillmem.constants.store import LOCAL_SKILL_DESCRIPTION_FALLBACK
from skillmem.parsers import extract_frontmatter, frontmatter_string
from skillmem.store.paths import get_local_skill_path
from skillmem.types import LocalSkill

logger = logging.getLogger(__name__)


def list_local_skills(config: StoreConfig) -> list[LocalSkill]:
    """Return every non-hidden skill folder that carries a readable manifest, sorted by name."""
    skills_dir = config.skills_dir
    if not skills_dir.is_dir():
        return []

    skills: list[LocalSkill] = []
    for entry in sorted(skills_dir.iterdir(), key=lambda path: path.name):
        if not entry.is_dir() or entry.name.startswith("."):
            continue
        skill = _read_local_skill(entry)
        if skill is not None:
            skills.append(skill)
    return skills


def get_local_skill(config: StoreConfig, name: str) -> LocalSkill | None:
    """Return the local skill named *name*, or None when it is absent or has no manifest."""
    skill_dir = get_local_skill_path(config, name)
    if not skill_dir.is_dir():
        return None
    return _read_local_skill(skill_dir)


def _read_local_skill(skill_dir: Path) -> LocalSkill | None:
    manifest = skill_dir / SKILL_MARKDOWN_FILENAME
    try:
        content = manifest.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping %s: %s", skill_dir, exc)
        return None

    frontmatter = extract_frontmatter(content)
    return LocalSkill(
        name=skill_dir.name,
        display_name=frontmatter_string(frontmatter, "name") or skill_dir.name,
        description=frontmatter_string(frontmatter, "description") or LOCAL_SKILL_DESCRIPTION_FALLBACK,
        path=skill_dir,
    )
