"""Tests for file I/O helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillmem.io import copy_file, copy_tree, count_files, is_binary_file, remove_tree, write_text_atomic


def test_write_text_atomic_preserves_line_endings(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "SKILL.md"

    write_text_atomic(path=out_path, content="a\r\nb\n")

    assert out_path.read_bytes() == b"a\r\nb\n"
    assert [item.name for item in out_path.parent.iterdir()] == ["SKILL.md"]


def test_write_text_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "SKILL.md"
    temp_prefix = ".tmp-"
    temp_suffix = ".part"

    with pytest.raises(UnicodeEncodeError):
        write_text_atomic(path=out_path, content="\ud800", temp_prefix=temp_prefix, temp_suffix=temp_suffix)

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_copy_tree_skips_git_metadata(tmp_path: Path) -> None:
    src = tmp_path / "src"
    (src / ".git").mkdir(parents=True)
    (src / ".git" / "HEAD").write_text("ref", encoding="utf-8")
    (src / "lib").mkdir()
    (src / "lib" / "a.py").write_text("a", encoding="utf-8")
    (src / "SKILL.md").write_text("s", encoding="utf-8")

    copy_tree(src, tmp_path / "dst")

    assert not (tmp_path / "dst" / ".git").exists()
    assert (tmp_path / "dst" / "lib" / "a.py").read_text(encoding="utf-8") == "a"
    assert count_files(src) == 2
    assert count_files(tmp_path / "dst") == 2


def test_copy_file_creates_parents(tmp_path: Path) -> None:
    src = tmp_path / "a.txt"
    src.write_text("data", encoding="utf-8")

    copy_file(src, tmp_path / "x" / "y" / "a.txt")

    assert (tmp_path / "x" / "y" / "a.txt").read_text(encoding="utf-8") == "data"


def test_remove_tree_handles_files_dirs_and_missing(tmp_path: Path) -> None:
    directory = tmp_path / "dir"
    (directory / "sub").mkdir(parents=True)
    single = tmp_path / "file.txt"
    single.write_text("x", encoding="utf-8")

    remove_tree(directory)
    remove_tree(single)
    remove_tree(tmp_path / "missing")

    assert not directory.exists()
    assert not single.exists()


@pytest.mark.parametrize(
    ("name", "data", "expected"),
    [
        pytest.param("image.PNG", b"text", True, id="binary-extension"),
        pytest.param("blob.dat", b"abc\x00def", True, id="null-byte"),
        pytest.param("notes.md", b"# Notes\n", False, id="text"),
    ],
)
def test_is_binary_file(tmp_path: Path, name: str, data: bytes, expected: bool) -> None:
    path = tmp_path / name
    path.write_bytes(data)

    assert is_binary_file(path) is expected


def test_is_binary_file_ignores_null_after_sniff_window(tmp_path: Path) -> None:
    path = tmp_path / "large.txt"
    path.write_bytes(b"a" * 8192 + b"\x00")

    assert is_binary_file(path) is False
