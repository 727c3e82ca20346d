"""Remote sources: cache management, listing, and adding skills to the local store."""

from __future__ import annotations

import logging
from typing import assert_never

from skillmem.config import StoreConfig
from skillmem.exceptions import GitError, GitNotInstalledError, InvalidReferenceError, SkillExistsError, SkillNotFoundError
from skillmem.io import copy_tree, remove_tree
from skillmem.operations.common import open_mutation_log
from skillmem.parsers import update_frontmatter_name
from skillmem.references import (
    build_clone_url,
    build_full_ref,
    format_repo_ref,
    is_valid_skill_name,
    parse_local_skill_name,
    parse_repo_reference,
    parse_skill_reference,
)
from skillmem.scanner import find_skill_by_name, parse_all_skills
from skillmem.store import get_local_skill_path, get_repo_cache_path, validate_local_path
from skillmem.types import GithubRepoRef, LocalRepoRef, MutationResult, RepoRef, SkillInfo, SourceTree
from skillmem.vcs import CommitMessage, GitBackend

logger = logging.getLogger(__name__)


def ensure_source(config: StoreConfig, git: GitBackend, ref: RepoRef) -> SourceTree:
    """Make *ref* available on disk.

    Local directories are used in place. GitHub repositories are shallow-cloned
    into the cache on first use; later uses refresh the cache and fall back to
    the cached copy with a warning when the refresh fails.
    """
    match ref:
        case LocalRepoRef(path=path):
            validate_local_path(path)
            return SourceTree(path=path, status="local")
        case GithubRepoRef():
            return _ensure_github_cache(config, git, ref)
        case _:
            assert_never(ref)


def list_remote_skills(config: StoreConfig, git: GitBackend, raw_repo: str) -> list[SkillInfo]:
    """Discover every skill in a GitHub repository or local directory."""
    ref = parse_repo_reference(raw_repo)
    source = ensure_source(config, git, ref)
    return parse_all_skills(source.path, ref)


def add_remote_skill(
    config: StoreConfig,
    git: GitBackend,
    raw_ref: str,
    rename: str | None = None,
) -> MutationResult:
    """Copy one skill from a source into the local store, optionally under a new name."""
    skill_ref = parse_skill_reference(raw_ref)
    if rename is not None:
        target = parse_local_skill_name(rename)
    else:
        target = skill_ref.skill_name
        if not is_valid_skill_name(target):
            raise InvalidReferenceError(
                f"Skill name '{target}' is not a valid local name. Use --rename to choose a different name."
            )

    local_path = get_local_skill_path(config, target)
    if local_path.exists():
        raise SkillExistsError(
            f"Skill '{target}' already exists at {local_path}. Use --rename to choose a different name."
        )

    source = ensure_source(config, git, skill_ref.repo)
    skill_dir = find_skill_by_name(source.path, skill_ref.skill_name, skill_ref.repo)
    if skill_dir is None:
        raise SkillNotFoundError(f"Skill '{skill_ref.skill_name}' not found in repository.")

    full_ref = build_full_ref(skill_ref.repo, skill_ref.skill_name)

    def apply() -> None:
        copy_tree(skill_dir, local_path)
        if target != skill_ref.skill_name:
            update_frontmatter_name(local_path, target)

    outcome = open_mutation_log(config, git).record(
        CommitMessage("feat", target, f"add skill from {full_ref}"),
        apply,
    )
    return MutationResult(summary=f"Added skill: {skill_ref.skill_name} → {local_path}", outcome=outcome)


def _ensure_github_cache(config: StoreConfig, git: GitBackend, ref: GithubRepoRef) -> SourceTree:
    if not git.is_available():
        raise GitNotInstalledError("Git is not installed. Please install git and try again.")

    cache_path = get_repo_cache_path(config, ref)
    if git.is_repo(cache_path):
        try:
            git.refresh(cache_path)
        except GitError as exc:
            warning = f"Could not update {format_repo_ref(ref)}: {exc}. Using cached version."
            logger.warning(warning)
            return SourceTree(path=cache_path, status="stale", warning=warning)
        return SourceTree(path=cache_path, status="refreshed")

    if cache_path.exists():
        logger.debug("Removing incomplete cache at %s", cache_path)
        remove_tree(cache_path)
    cache_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Fetching %s...", format_repo_ref(ref))
    try:
        git.clone(build_clone_url(ref), cache_path)
    except GitError:
        remove_tree(cache_path)
        raise
    return SourceTree(path=cache_path, status="cloned")
