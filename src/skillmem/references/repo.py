"""Repository and skill reference parsing.

Accepted forms::

    github.com@<owner>/<repo>[@<skill>]
    localhost@<path>[@<skill>]

``<path>`` may be ``~``, ``~/rest``, relative (resolved against the current
working directory) or absolute. Skill references split on the *last* ``@`` so
local paths never need escaping.
"""

from __future__ import annotations

from pathlib import Path
from typing import assert_never

from skillmem.constants.references import (
    GITHUB_CLONE_URL_TEMPLATE,
    GITHUB_HOST,
    LOCAL_HOST,
    PATH_SEPARATOR,
    REF_SEPARATOR,
    REPO_REF_FORMS,
    SKILL_REF_FORMS,
    SUPPORTED_HOSTS,
)
from skillmem.exceptions import InvalidReferenceError
from skillmem.types import GithubRepoRef, LocalRepoRef, RepoRef, SkillRef


def parse_repo_reference(ref: str) -> RepoRef:
    """Parse ``github.com@owner/repo`` or ``localhost@path``."""
    host, sep, remainder = ref.partition(REF_SEPARATOR)
    if not sep:
        raise InvalidReferenceError(f'Invalid repo reference: "{ref}". Expected format: {REPO_REF_FORMS}')

    if host == GITHUB_HOST:
        return _parse_github_remainder(ref, remainder)
    if host == LOCAL_HOST:
        return LocalRepoRef(path=_resolve_local_path(ref, remainder))

    accepted = " or ".join(SUPPORTED_HOSTS)
    raise InvalidReferenceError(f'Invalid host: "{host}". Only {accepted} are supported.')


def parse_skill_reference(ref: str) -> SkillRef:
    """Parse ``<repo-ref>@<skill>`` by splitting on the last ``@``."""
    repo_part, sep, skill_name = ref.rpartition(REF_SEPARATOR)
    if not sep or not repo_part:
        raise InvalidReferenceError(f'Invalid skill reference: "{ref}". Expected format: {SKILL_REF_FORMS}')

    skill_name = skill_name.strip()
    if not skill_name:
        raise InvalidReferenceError(f'Invalid skill reference: "{ref}". Skill name cannot be empty.')

    if REF_SEPARATOR not in repo_part:
        raise InvalidReferenceError(f'Invalid skill reference: "{ref}". Expected format: {SKILL_REF_FORMS}')

    return SkillRef(repo=parse_repo_reference(repo_part), skill_name=skill_name)


def build_clone_url(ref: GithubRepoRef) -> str:
    """Build the HTTPS clone URL for a GitHub repository."""
    return GITHUB_CLONE_URL_TEMPLATE.format(owner=ref.owner, repo=ref.repo)


def format_repo_ref(ref: RepoRef) -> str:
    """Render a repository reference back into its address form."""
    match ref:
        case GithubRepoRef(owner=owner, repo=repo):
            return f"{ref.host}{REF_SEPARATOR}{owner}{PATH_SEPARATOR}{repo}"
        case LocalRepoRef(path=path):
            return f"{ref.host}{REF_SEPARATOR}{path.as_posix()}"
        case _:
            assert_never(ref)


def build_full_ref(ref: RepoRef, skill_name: str) -> str:
    """Build ``host@owner/repo@skill`` or ``localhost@/path@skill``."""
    return f"{format_repo_ref(ref)}{REF_SEPARATOR}{skill_name}"


def _parse_github_remainder(ref: str, owner_repo: str) -> GithubRepoRef:
    owner, sep, repo = owner_repo.partition(PATH_SEPARATOR)
    if not sep or PATH_SEPARATOR in repo:
        raise InvalidReferenceError(f'Invalid repo reference: "{ref}". Expected format: github.com@owner/repo')
    if not owner or not repo:
        raise InvalidReferenceError(f'Invalid repo reference: "{ref}". Owner and repo cannot be empty.')
    return GithubRepoRef(owner=owner, repo=repo)


def _resolve_local_path(ref: str, raw_path: str) -> Path:
    if not raw_path:
        raise InvalidReferenceError(f'Invalid repo reference: "{ref}". Local path cannot be empty.')
    if raw_path == "~":
        return Path.home()
    if raw_path.startswith("~/"):
        return Path.home() / raw_path[2:]
    return Path(raw_path).resolve()
