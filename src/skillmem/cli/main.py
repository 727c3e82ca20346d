"""CLI entrypoint for skill-memory."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillmem import __version__
from skillmem.cli import handlers
from skillmem.config import load_store_config
from skillmem.constants.branding import CLI_DESCRIPTION, PROG_NAME
from skillmem.exceptions import ConfigError, SkillMemoryError
from skillmem.vcs import SubprocessGit

_HANDLERS: dict[str, handlers.Handler] = {
    "list": handlers.handle_list,
    "init": handlers.handle_init,
    "delete": handlers.handle_delete,
    "copy": handlers.handle_copy,
    "rename": handlers.handle_rename,
    "view": handlers.handle_view,
    "download": handlers.handle_download,
    "upsert": handlers.handle_upsert,
    "undo": handlers.handle_undo,
    "history": handlers.handle_history,
    "remote list": handlers.handle_remote_list,
    "remote add": handlers.handle_remote_add,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show git invocations and diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List local skills")

    init = subparsers.add_parser("init", help="Create a new skill from the starter template")
    init.add_argument("name", help="Skill name (@name or name)")

    delete = subparsers.add_parser("delete", help="Delete a skill or a file inside it")
    delete.add_argument("target", help="@name, name, or @name/path")

    copy = subparsers.add_parser("copy", help="Copy a skill to a new name")
    copy.add_argument("source", help="Existing skill name")
    copy.add_argument("target", help="New skill name")

    rename = subparsers.add_parser("rename", help="Rename a skill")
    rename.add_argument("source", help="Existing skill name")
    rename.add_argument("target", help="New skill name")

    view = subparsers.add_parser("view", help="Print a text file from a skill")
    view.add_argument("ref", help="@name/path")

    download = subparsers.add_parser("download", help="Copy a skill, file or folder out of the store")
    download.add_argument("ref", help="@name or @name/path")
    download.add_argument("destination", help="Target file or directory")

    upsert = subparsers.add_parser("upsert", help="Add or replace a file inside a skill")
    upsert.add_argument("source", type=Path, help="Local file to copy in")
    upsert.add_argument("dest", help="@name/path inside the skill")
    upsert.add_argument("-m", "--message", default=None, help="Extended commit message")

    subparsers.add_parser("undo", help="Revert the most recent change")

    history = subparsers.add_parser("history", help="Show the change history, newest first")
    history.add_argument("--offset", type=int, default=0, help="Number of entries to skip (default: 0)")
    history.add_argument("--limit", type=int, default=None, help="Number of entries to show (default: 20)")

    remote = subparsers.add_parser("remote", help="Work with remote skill sources")
    remote_commands = remote.add_subparsers(dest="remote_command", required=True)

    remote_list = remote_commands.add_parser("list", help="List skills in a repository or local directory (JSON)")
    remote_list.add_argument("repo", help="github.com@owner/repo or localhost@path")

    remote_add = remote_commands.add_parser("add", help="Add a skill from a repository or local directory")
    remote_add.add_argument("skill", help="github.com@owner/repo@name or localhost@path@name")
    remote_add.add_argument("--rename", default=None, help="Use a custom local name for the skill")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_store_config()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    git = SubprocessGit(local_timeout=config.git_timeout, network_timeout=config.network_timeout)
    command = args.command if args.command != "remote" else f"remote {args.remote_command}"
    handler = _HANDLERS.get(command)
    if handler is None:
        parser.error(f"Unsupported command: {command}")

    try:
        return handler(args, config, git)
    except (SkillMemoryError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
