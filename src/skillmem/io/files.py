"""Whole-tree copy/delete helpers and binary-file detection."""

from __future__ import annotations

import shutil
from pathlib import Path

from skillmem.constants.files import BINARY_EXTENSIONS, BINARY_SNIFF_BYTES, COPY_IGNORED_NAMES


def copy_tree(src: Path, dst: Path) -> None:
    """Recursively copy *src* to *dst*, skipping version-control metadata."""
    shutil.copytree(src, dst, ignore=shutil.ignore_patterns(*COPY_IGNORED_NAMES))


def copy_file(src: Path, dst: Path) -> None:
    """Copy one file, creating parent directories of *dst* as needed."""
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)


def remove_tree(path: Path) -> None:
    """Delete *path* recursively; a missing path is not an error."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def count_files(path: Path) -> int:
    """Count regular files below *path*, ignoring version-control metadata."""
    count = 0
    for entry in path.iterdir():
        if entry.is_dir():
            if entry.name in COPY_IGNORED_NAMES:
                continue
            count += count_files(entry)
        else:
            count += 1
    return count


def is_binary_file(path: Path) -> bool:
    """Return True for known binary extensions or content containing a NUL byte."""
    if path.suffix.lower() in BINARY_EXTENSIONS:
        return True
    try:
        with path.open("rb") as handle:
            chunk = handle.read(BINARY_SNIFF_BYTES)
    except OSError:
        return False
    return b"\x00" in chunk
