"""Tests for the module size guardrail script."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

import pytest

SCRIPT_PATH: Path = Path(__file__).resolve().parents[1] / "scripts" / "check_file_sizes.py"


@pytest.fixture(scope="module")
def guard() -> ModuleType:
    spec = importlib.util.spec_from_file_location("check_file_sizes", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def _write_module(path: Path, loc: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["# comment", ""] + [f"x{i} = {i}" for i in range(loc)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_count_loc_ignores_blanks_and_comments(guard: ModuleType, tmp_path: Path) -> None:
    module = tmp_path / "m.py"
    _write_module(module, 3)

    assert guard.count_loc(module) == 3


def test_find_violations(guard: ModuleType, tmp_path: Path) -> None:
    _write_module(tmp_path / "src" / "skillmem" / "small.py", 10)
    _write_module(tmp_path / "src" / "skillmem" / "soft.py", 350)
    _write_module(tmp_path / "src" / "skillmem" / "__init__.py", 900)
    _write_module(tmp_path / "tests" / "test_huge.py", 800)

    violations = guard.find_violations(tmp_path)

    assert [(v.level, v.path.as_posix()) for v in violations] == [
        ("warning", "src/skillmem/soft.py"),
        ("error", "tests/test_huge.py"),
    ]
    assert guard.main(["--root", str(tmp_path)]) == 1


def test_repository_within_hard_caps(guard: ModuleType) -> None:
    violations = guard.find_violations(SCRIPT_PATH.parents[1])

    assert [v for v in violations if v.level == "error"] == []
