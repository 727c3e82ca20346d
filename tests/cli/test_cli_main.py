"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest
from fake_git import FakeGit

from skillmem.cli import main as cli_main
from skillmem.cli.main import build_parser, main
from skillmem.exceptions import GitTimeoutError

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"


@pytest.fixture()
def store_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "home"
    monkeypatch.setenv("SKILL_MEMORY_HOME", str(root))
    return root


@pytest.fixture()
def cli_git(monkeypatch: pytest.MonkeyPatch) -> FakeGit:
    git = FakeGit()
    monkeypatch.setattr(cli_main, "SubprocessGit", lambda **kwargs: git)
    return git


def test_build_parser_upsert_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(["upsert", str(tmp_path / "a.py"), "@xlsx/a.py", "-m", "why"])

    assert args.command == "upsert"
    assert args.source == tmp_path / "a.py"
    assert args.dest == "@xlsx/a.py"
    assert args.message == "why"


def test_build_parser_history_defaults() -> None:
    args = build_parser().parse_args(["history"])

    assert args.offset == 0
    assert args.limit is None


def test_build_parser_remote_add_rename() -> None:
    args = build_parser().parse_args(["remote", "add", "github.com@a/b@c", "--rename", "d"])

    assert (args.command, args.remote_command, args.skill, args.rename) == ("remote", "add", "github.com@a/b@c", "d")


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("skill-memory ")


def test_init_and_list(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["init", "@xlsx"]) == 0
    assert main(["init", "pdf-tools"]) == 0
    capsys.readouterr()

    assert main(["list"]) == 0

    out = capsys.readouterr().out
    assert "@pdf-tools  A brief description of what this skill does" in out
    assert "@xlsx       A brief description of what this skill does" in out
    assert out.rstrip().endswith("2 skills installed")


def test_list_empty(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list"]) == 0

    assert "No skills installed" in capsys.readouterr().out


def test_errors_go_to_stderr(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["delete", "@missing"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Error: Skill 'missing' not found in local library."


def test_invalid_reference_exit_code(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["view", "xlsx/SKILL.md"]) == 1

    assert "must start with '@'" in capsys.readouterr().err


def test_config_error_exit_code(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    store_root.mkdir()
    (store_root / "config.yaml").write_text("unknown_key: 1\n", encoding="utf-8")

    assert main(["list"]) == 2

    assert capsys.readouterr().err.startswith("Configuration error:")


def test_migration_notice(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    for name in ("alpha", "beta"):
        (store_root / "skills" / name).mkdir(parents=True)
        (store_root / "skills" / name / "SKILL.md").write_text(f"---\nname: {name}\n---\n", encoding="utf-8")

    assert main(["init", "gamma"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[git] Initialized repository with existing skills (alpha, beta)",
        "Created skill: @gamma",
    ]


def test_commit_timeout_exits_non_zero(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    cli_git.failures["commit"] = GitTimeoutError("commit", 5)

    assert main(["init", "xlsx"]) == 1

    captured = capsys.readouterr()
    assert "Created skill: @xlsx" in captured.out
    assert "timed out" in captured.err
    assert (store_root / "skills" / "xlsx" / "SKILL.md").is_file()


def test_view_truncation_marker(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    main(["init", "xlsx"])
    (store_root / "config.yaml").write_text("view_max_lines: 2\n", encoding="utf-8")
    capsys.readouterr()

    assert main(["view", "@xlsx/SKILL.md"]) == 0

    assert capsys.readouterr().out == "---\nname: xlsx\n[truncated]\n"


def test_upsert_undo_history(
    store_root: Path,
    cli_git: FakeGit,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "recalc.py"
    source.write_text("print(1)\n", encoding="utf-8")
    main(["init", "xlsx"])
    main(["upsert", str(source), "@xlsx/recalc.py", "-m", "first cut"])
    capsys.readouterr()

    assert main(["history", "--limit", "1"]) == 0
    history_out = capsys.readouterr().out
    assert history_out.startswith("History (showing 1-1 of 2):")
    assert "2026-01-02 03:04:05  feat(xlsx): add recalc.py" in history_out

    assert main(["undo"]) == 0
    assert capsys.readouterr().out.startswith("Undone: feat(xlsx): add recalc.py")
    assert not (store_root / "skills" / "xlsx" / "recalc.py").exists()

    assert main(["history", "--offset", "5"]) == 0
    assert capsys.readouterr().out.strip() == "No more history entries."


def test_undo_without_history(store_root: Path, cli_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["undo"]) == 1

    assert capsys.readouterr().err.strip() == "Error: Skills directory not found."


def _load_schema(name: str) -> dict[str, Any]:
    return json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))


def test_remote_list_output_matches_schema(
    store_root: Path,
    cli_git: FakeGit,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "source"
    for name, description in (("xlsx", "Spreadsheets"), ("pdf", "PDFs")):
        (source / name).mkdir(parents=True)
        (source / name / "SKILL.md").write_text(f"---\nname: {name}\ndescription: {description}\n---\n", encoding="utf-8")
    schema = _load_schema("remote-list.schema.json")
    jsonschema.Draft202012Validator.check_schema(schema)

    assert main(["remote", "list", f"localhost@{source}"]) == 0

    payload = json.loads(capsys.readouterr().out)
    jsonschema.validate(instance=payload, schema=schema)
    assert [item["description"] for item in payload] == ["PDFs", "Spreadsheets"]


def test_remote_add_then_conflict(
    store_root: Path,
    cli_git: FakeGit,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "source"
    (source / "xlsx").mkdir(parents=True)
    (source / "xlsx" / "SKILL.md").write_text("---\nname: xlsx\n---\n", encoding="utf-8")

    assert main(["remote", "add", f"localhost@{source}@xlsx"]) == 0
    assert main(["remote", "add", f"localhost@{source}@xlsx"]) == 1
    assert "Use --rename" in capsys.readouterr().err
    assert main(["remote", "add", f"localhost@{source}@xlsx", "--rename", "sheets"]) == 0
    assert (store_root / "skills" / "sheets" / "SKILL.md").read_text(encoding="utf-8") == "---\nname: sheets\n---\n"
