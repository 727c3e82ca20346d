"""Tests for reading local skill records."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from skillmem.config import StoreConfig
from skillmem.store import get_local_skill, list_local_skills


def test_list_local_skills_missing_directory(store_config: StoreConfig) -> None:
    assert list_local_skills(store_config) == []


def test_list_local_skills_sorted_and_filtered(store_config: StoreConfig, write_skill: Callable[..., Path]) -> None:
    skills_dir = store_config.skills_dir
    write_skill(skills_dir, "zeta")
    write_skill(skills_dir, "alpha", "---\nname: Alpha Display\n---\nbody\n")
    write_skill(skills_dir, ".hidden")
    (skills_dir / "no-manifest").mkdir()
    (skills_dir / "stray.txt").write_text("x", encoding="utf-8")

    skills = list_local_skills(store_config)

    assert [skill.name for skill in skills] == ["alpha", "zeta"]
    assert skills[0].display_name == "Alpha Display"
    assert skills[0].description == "No description"
    assert skills[1].description == "The zeta skill"
    assert skills[1].path == skills_dir / "zeta"


def test_get_local_skill(store_config: StoreConfig, write_skill: Callable[..., Path]) -> None:
    write_skill(store_config.skills_dir, "pdf", "# PDF\n")

    skill = get_local_skill(store_config, "pdf")

    assert skill is not None
    assert skill.display_name == "pdf"
    assert get_local_skill(store_config, "missing") is None
