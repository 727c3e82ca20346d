"""Shared pytest fixtures: isolated store roots and git backends."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest
from fake_git import FakeGit

from skillmem.config import StoreConfig
from skillmem.vcs import SubprocessGit


@pytest.fixture()
def store_config(tmp_path: Path) -> StoreConfig:
    """Return a config rooted in an isolated temporary store."""
    return StoreConfig(root=tmp_path / "store")


@pytest.fixture()
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture()
def write_skill() -> Callable[..., Path]:
    """Return a helper that writes ``<parent>/<folder>/SKILL.md``."""

    def _write(parent: Path, folder: str, content: str | None = None) -> Path:
        skill_dir = parent / folder
        skill_dir.mkdir(parents=True, exist_ok=True)
        if content is None:
            content = f"---\nname: {folder}\ndescription: The {folder} skill\n---\n\n# {folder}\n"
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        return skill_dir

    return _write


@pytest.fixture()
def real_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> SubprocessGit:
    """Return a SubprocessGit isolated from user/system git configuration."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    global_config = tmp_path / "gitconfig"
    global_config.write_text("[init]\n\tdefaultBranch = main\n", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for prefix in ("GIT_AUTHOR", "GIT_COMMITTER"):
        monkeypatch.setenv(f"{prefix}_NAME", "Skill Tester")
        monkeypatch.setenv(f"{prefix}_EMAIL", "tester@example.com")
    return SubprocessGit(local_timeout=30, network_timeout=30)
