"""File-level operations inside a local skill: upsert, view, download."""

from __future__ import annotations

from pathlib import Path

from skillmem.config import StoreConfig
from skillmem.exceptions import LocalPathError, SkillExistsError, SkillNotFoundError, SkillOperationError
from skillmem.io import copy_file, copy_tree, count_files, is_binary_file
from skillmem.operations.common import open_mutation_log, require_skill_dir
from skillmem.references import parse_skill_path_ref
from skillmem.store import resolve_skill_file
from skillmem.types import DownloadResult, MutationResult, ViewResult
from skillmem.vcs import CommitMessage, GitBackend


def upsert_file(
    config: StoreConfig,
    git: GitBackend,
    source: Path,
    raw_dest: str,
    message: str | None = None,
) -> MutationResult:
    """Copy a local file into a skill, creating parent directories as needed.

    A new file is recorded as ``feat(<skill>): add <path>``, an overwritten one
    as ``fix(<skill>): update <path>``; *message* becomes the commit body.
    """
    source_path = source.expanduser().resolve()
    if not source_path.exists():
        raise LocalPathError(f"Source file '{source}' not found.")
    if not source_path.is_file():
        raise LocalPathError("Source must be a file, not a directory.")

    ref = parse_skill_path_ref(raw_dest)
    skill_dir = require_skill_dir(config, ref.skill_name)
    target = resolve_skill_file(skill_dir, ref.file_path)
    if target.is_dir():
        raise SkillOperationError(f"'{ref.file_path}' is a directory in skill '{ref.skill_name}'.")

    is_update = target.exists()
    commit_message = CommitMessage(
        "fix" if is_update else "feat",
        ref.skill_name,
        f"update {ref.file_path}" if is_update else f"add {ref.file_path}",
        body=message or None,
    )
    outcome = open_mutation_log(config, git).record(commit_message, lambda: copy_file(source_path, target))
    return MutationResult(summary=f"Upserted: {source} → @{ref.skill_name}/{ref.file_path}", outcome=outcome)


def view_file(config: StoreConfig, raw_ref: str) -> ViewResult:
    """Return the text of a skill file, cut after ``config.view_max_lines`` lines."""
    ref = parse_skill_path_ref(raw_ref)
    skill_dir = require_skill_dir(config, ref.skill_name)
    target = resolve_skill_file(skill_dir, ref.file_path)

    if not target.exists():
        raise SkillNotFoundError(f"File '{ref.file_path}' not found in skill '{ref.skill_name}'.")
    if target.is_dir():
        raise SkillOperationError(f"'{ref.file_path}' is a directory, not a file.")
    if is_binary_file(target):
        raise SkillOperationError(
            f"Cannot view binary file '{target.name}'. "
            f"Use 'download @{ref.skill_name}/{ref.file_path} ./' to fetch it."
        )

    content = target.read_text(encoding="utf-8", errors="replace")
    lines = content.removesuffix("\n").split("\n")
    if len(lines) > config.view_max_lines:
        return ViewResult(content="\n".join(lines[: config.view_max_lines]), truncated=True)
    return ViewResult(content=content, truncated=False)


def download(config: StoreConfig, raw_ref: str, destination: str) -> DownloadResult:
    """Export a skill, or a file or directory inside it, to *destination*.

    An existing directory destination receives the source under its own
    name; a missing destination is used as the target path itself (a
    trailing separator makes it a directory for file sources). Existing
    files are never overwritten.
    """
    ref = parse_skill_path_ref(raw_ref, allow_empty_path=True)
    skill_dir = require_skill_dir(config, ref.skill_name)
    source = resolve_skill_file(skill_dir, ref.file_path)
    if not source.exists():
        raise SkillNotFoundError(f"'{ref.file_path}' not found in skill '{ref.skill_name}'.")

    source_name = Path(ref.file_path).name if ref.file_path else ref.skill_name
    dest = Path(destination).expanduser().resolve()

    if source.is_dir():
        target = _directory_target(dest, source_name)
        copy_tree(source, target)
        display = f"@{ref.skill_name}/{ref.file_path}/" if ref.file_path else f"@{ref.skill_name}/"
        file_count = count_files(target)
        return DownloadResult(
            summary=f"Downloaded: {display} → {target.name}/ ({file_count} files)",
            target=target,
            file_count=file_count,
        )

    target = _file_target(dest, source_name, trailing_separator=destination.endswith(("/", "\\")))
    copy_file(source, target)
    return DownloadResult(summary=f"Downloaded: @{ref.skill_name}/{ref.file_path} → {target}", target=target)


def _file_target(dest: Path, source_name: str, *, trailing_separator: bool) -> Path:
    if dest.is_dir():
        target = dest / source_name
    elif dest.exists():
        raise SkillExistsError(f"File '{dest}' already exists.")
    elif trailing_separator:
        target = dest / source_name
    else:
        target = dest

    if target.exists():
        raise SkillExistsError(f"File '{target}' already exists.")
    return target


def _directory_target(dest: Path, source_name: str) -> Path:
    if dest.is_dir():
        target = dest / source_name
    elif dest.exists():
        raise SkillExistsError(f"Cannot overwrite file '{dest}' with directory.")
    else:
        target = dest

    if target.exists():
        raise SkillExistsError(f"'{target}' already exists.")
    return target
