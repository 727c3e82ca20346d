"""CLI subcommand handlers: call an operation, render its result, pick an exit code."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from typing import TypeAlias

from skillmem import operations
from skillmem.config import StoreConfig
from skillmem.constants.branding import GIT_MESSAGE_PREFIX, PROG_NAME
from skillmem.constants.files import VIEW_TRUNCATION_MARKER
from skillmem.types import MutationResult
from skillmem.vcs import GitBackend

Handler: TypeAlias = Callable[[argparse.Namespace, StoreConfig, GitBackend], int]


def handle_list(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    skills = operations.list_skills(config)
    if not skills:
        print(f"No skills installed. Use '{PROG_NAME} remote add' to add skills.")
        return 0

    width = max(len(skill.name) for skill in skills) + 2
    for skill in skills:
        print(f"{'@' + skill.name:<{width}} {skill.description}")
    print()
    print(f"{len(skills)} skill{'' if len(skills) == 1 else 's'} installed")
    return 0


def handle_init(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    return report_mutation(operations.init_skill(config, git, args.name))


def handle_delete(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    return report_mutation(operations.delete(config, git, args.target))


def handle_copy(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    return report_mutation(operations.copy_skill(config, git, args.source, args.target))


def handle_rename(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    return report_mutation(operations.rename_skill(config, git, args.source, args.target))


def handle_upsert(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    return report_mutation(operations.upsert_file(config, git, args.source, args.dest, args.message))


def handle_view(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    result = operations.view_file(config, args.ref)
    sys.stdout.write(result.content)
    if not result.content.endswith("\n"):
        sys.stdout.write("\n")
    if result.truncated:
        print(VIEW_TRUNCATION_MARKER)
    return 0


def handle_download(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    result = operations.download(config, args.ref, args.destination)
    print(result.summary)
    return 0


def handle_undo(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    message = operations.undo(config, git)
    print(f"Undone: {message}")
    print("Skills directory reset to previous state.")
    return 0


def handle_history(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    page = operations.history(config, git, offset=args.offset, limit=args.limit)
    if page.total == 0:
        print(f"No history found. Run some {PROG_NAME} commands first.")
        return 0
    if not page.entries:
        print("No more history entries.")
        return 0

    first = page.offset + 1
    last = page.offset + len(page.entries)
    print(f"History (showing {first}-{last} of {page.total}):")
    print()
    for entry in page.entries:
        print(f"  {entry.date}  {entry.message}")
    return 0


def handle_remote_list(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    skills = operations.list_remote_skills(config, git, args.repo)
    print(json.dumps([skill.to_dict() for skill in skills], indent=2))
    return 0


def handle_remote_add(args: argparse.Namespace, config: StoreConfig, git: GitBackend) -> int:
    return report_mutation(operations.add_remote_skill(config, git, args.skill, rename=args.rename))


def report_mutation(result: MutationResult) -> int:
    """Print the migration notice and summary; a failed commit makes the exit code non-zero."""
    outcome = result.outcome
    bootstrap = outcome.bootstrap
    if bootstrap is not None and bootstrap.migrated_skills:
        skills = ", ".join(bootstrap.migrated_skills)
        print(f"{GIT_MESSAGE_PREFIX} Initialized repository with existing skills ({skills})")

    print(result.summary)
    if outcome.status == "failed":
        print(f"Error: {outcome.warning}", file=sys.stderr)
        return 1
    return 0
