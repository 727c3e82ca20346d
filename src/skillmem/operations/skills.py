"""Whole-skill operations on the local store: list, init, delete, copy, rename."""

from __future__ import annotations

from skillmem.config import StoreConfig
from skillmem.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillmem.constants.references import REF_SEPARATOR
from skillmem.exceptions import SkillExistsError, SkillNotFoundError, SkillOperationError
from skillmem.io import copy_tree, remove_tree, write_text_atomic
from skillmem.operations.common import open_mutation_log, require_skill_dir
from skillmem.parsers import update_frontmatter_name
from skillmem.references import parse_local_skill_name, parse_skill_path_ref
from skillmem.store import get_local_skill_path, list_local_skills, resolve_skill_file
from skillmem.templates import generate_skill_template
from skillmem.types import LocalSkill, MutationResult
from skillmem.vcs import CommitMessage, GitBackend


def list_skills(config: StoreConfig) -> list[LocalSkill]:
    return list_local_skills(config)


def init_skill(config: StoreConfig, git: GitBackend, raw_name: str) -> MutationResult:
    """Create ``skills/<name>/SKILL.md`` from the starter template."""
    name = parse_local_skill_name(raw_name)
    skill_dir = get_local_skill_path(config, name)
    if skill_dir.exists():
        raise SkillExistsError(f"Skill '{name}' already exists.")

    def apply() -> None:
        skill_dir.mkdir(parents=True)
        write_text_atomic(path=skill_dir / SKILL_MARKDOWN_FILENAME, content=generate_skill_template(name))

    outcome = open_mutation_log(config, git).record(CommitMessage("feat", name, "initialize new skill"), apply)
    return MutationResult(summary=f"Created skill: @{name}", outcome=outcome)


def delete(config: StoreConfig, git: GitBackend, raw_ref: str) -> MutationResult:
    """Delete a whole skill (``@name`` or ``name``) or one entry inside it (``@name/path``)."""
    if raw_ref.strip().startswith(REF_SEPARATOR):
        ref = parse_skill_path_ref(raw_ref, allow_empty_path=True)
        if ref.file_path:
            return delete_skill_file(config, git, ref.skill_name, ref.file_path)
        return delete_skill(config, git, ref.skill_name)
    return delete_skill(config, git, raw_ref)


def delete_skill(config: StoreConfig, git: GitBackend, raw_name: str) -> MutationResult:
    name = parse_local_skill_name(raw_name)
    skill_dir = get_local_skill_path(config, name)
    if not skill_dir.is_dir():
        raise SkillNotFoundError(f"Skill '{name}' not found in local library.")

    outcome = open_mutation_log(config, git).record(
        CommitMessage("chore", name, "delete skill"),
        lambda: remove_tree(skill_dir),
    )
    return MutationResult(summary=f"Deleted skill: @{name}", outcome=outcome)


def delete_skill_file(config: StoreConfig, git: GitBackend, name: str, file_path: str) -> MutationResult:
    """Remove one file or sub-directory from a skill."""
    skill_dir = require_skill_dir(config, name)
    target = resolve_skill_file(skill_dir, file_path)
    if not target.exists():
        raise SkillNotFoundError(f"'{file_path}' not found in skill '{name}'.")

    outcome = open_mutation_log(config, git).record(
        CommitMessage("chore", name, f"delete {file_path}"),
        lambda: remove_tree(target),
    )
    return MutationResult(summary=f"Deleted: @{name}/{file_path}", outcome=outcome)


def copy_skill(config: StoreConfig, git: GitBackend, raw_source: str, raw_target: str) -> MutationResult:
    """Duplicate a skill under a new name and point its manifest at that name."""
    source, target = _resolve_pair(config, raw_source, raw_target, verb="copy")
    source_dir = get_local_skill_path(config, source)
    target_dir = get_local_skill_path(config, target)

    def apply() -> None:
        copy_tree(source_dir, target_dir)
        update_frontmatter_name(target_dir, target)

    outcome = open_mutation_log(config, git).record(
        CommitMessage("feat", target, f"copy skill from {source}"),
        apply,
    )
    return MutationResult(summary=f"Copied skill: @{source} → @{target}", outcome=outcome)


def rename_skill(config: StoreConfig, git: GitBackend, raw_source: str, raw_target: str) -> MutationResult:
    """Move a skill to a new name and point its manifest at that name."""
    source, target = _resolve_pair(config, raw_source, raw_target, verb="rename")
    source_dir = get_local_skill_path(config, source)
    target_dir = get_local_skill_path(config, target)

    def apply() -> None:
        source_dir.rename(target_dir)
        update_frontmatter_name(target_dir, target)

    outcome = open_mutation_log(config, git).record(
        CommitMessage("refactor", target, f"rename skill from {source}"),
        apply,
    )
    return MutationResult(summary=f"Renamed skill: @{source} → @{target}", outcome=outcome)


def _resolve_pair(config: StoreConfig, raw_source: str, raw_target: str, *, verb: str) -> tuple[str, str]:
    source = parse_local_skill_name(raw_source)
    target = parse_local_skill_name(raw_target)
    if source == target:
        raise SkillOperationError(f"Cannot {verb} to same name")
    require_skill_dir(config, source)
    if get_local_skill_path(config, target).exists():
        raise SkillExistsError(f"Skill '{target}' already exists.")
    return source, target
