"""Tests for skill discovery inside source trees."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from skillmem.scanner import find_skill_by_name, find_skill_files, parse_all_skills, parse_skill_info
from skillmem.types import GithubRepoRef, LocalRepoRef

REPO = GithubRepoRef(owner="anthropics", repo="skills")


def test_find_skill_files_skips_vcs_and_dependencies(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    write_skill(tmp_path, "b-skill")
    write_skill(tmp_path / "nested", "a-skill")
    write_skill(tmp_path / ".git", "ignored")
    write_skill(tmp_path / "node_modules", "ignored-too")

    files = find_skill_files(tmp_path)

    assert files == [tmp_path / "b-skill" / "SKILL.md", tmp_path / "nested" / "a-skill" / "SKILL.md"]


def test_parse_skill_info_uses_header(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    skill_dir = write_skill(tmp_path / "skills", "folder", "---\nname: xlsx\ndescription: Spreadsheets\n---\n")

    info = parse_skill_info(skill_dir / "SKILL.md", tmp_path, REPO)

    assert info.name == "xlsx"
    assert info.description == "Spreadsheets"
    assert info.path == "skills/folder"
    assert info.full_ref == "github.com@anthropics/skills@xlsx"


def test_parse_skill_info_falls_back_to_folder_and_body(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    long_line = "x" * 150
    skill_dir = write_skill(tmp_path, "pdf", f"# PDF\n\n## Usage\n{long_line}\n")

    info = parse_skill_info(skill_dir / "SKILL.md", tmp_path, REPO)

    assert info.name == "pdf"
    assert info.description == "x" * 100


@pytest.mark.parametrize(
    "content",
    [
        pytest.param("# Only a heading\n\n", id="heading-only"),
        pytest.param("", id="empty"),
        pytest.param("---\nname: [broken\n---\n", id="malformed-header"),
    ],
)
def test_parse_skill_info_description_fallback(tmp_path: Path, write_skill: Callable[..., Path], content: str) -> None:
    skill_dir = write_skill(tmp_path, "bare", content)

    info = parse_skill_info(skill_dir / "SKILL.md", tmp_path, REPO)

    assert info.name == "bare"
    assert info.description == "No description available"


def test_parse_skill_info_blank_name_uses_folder(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    skill_dir = write_skill(tmp_path, "folder-name", "---\nname: '  '\ndescription: d\n---\n")

    assert parse_skill_info(skill_dir / "SKILL.md", tmp_path, REPO).name == "folder-name"


def test_parse_all_skills_skips_unreadable(
    tmp_path: Path,
    write_skill: Callable[..., Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_skill(tmp_path, "good")
    bad = tmp_path / "bad"
    bad.mkdir()
    (bad / "SKILL.md").write_bytes(b"\xff\xfe\x00bad")
    ref = LocalRepoRef(path=tmp_path)

    with caplog.at_level(logging.WARNING):
        skills = parse_all_skills(tmp_path, ref)

    assert [skill.name for skill in skills] == ["good"]
    assert skills[0].full_ref == f"localhost@{tmp_path.as_posix()}@good"
    assert "Could not parse" in caplog.text


def test_find_skill_by_name_matches_declared_name(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    write_skill(tmp_path / "a", "first", "---\nname: shared\n---\n")
    write_skill(tmp_path / "b", "second", "---\nname: shared\n---\n")
    write_skill(tmp_path, "plain")

    assert find_skill_by_name(tmp_path, "shared", REPO) == tmp_path / "a" / "first"
    assert find_skill_by_name(tmp_path, "plain", REPO) == tmp_path / "plain"
    assert find_skill_by_name(tmp_path, "missing", REPO) is None
