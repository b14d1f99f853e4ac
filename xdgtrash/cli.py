"""Command-line interface for managing the XDG trash."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Optional, Sequence

from xdgtrash.config import Settings, ensure_dirs, load_settings
from xdgtrash.operations import (
    TrashError,
    empty_trash,
    list_trash,
    move_to_trash,
    restore_from_trash,
)
from xdgtrash.paths import home_trash_paths, trash_paths

Handler = Callable[[argparse.Namespace, Settings], int]


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _run_list(args: argparse.Namespace, settings: Settings) -> int:
    _, info_dir = home_trash_paths(settings)
    try:
        entries = list_trash(info_dir, args.details)
    except TrashError as exc:
        _report(f"Error listing trash: {exc}")
        return 1
    for entry in entries:
        _report(entry)
    return 0


def _run_remove(args: argparse.Namespace, settings: Settings) -> int:
    succeeded = True
    for file_name in args.files:
        try:
            files_dir, info_dir = trash_paths(file_name, settings)
        except OSError as exc:
            _report(f"Error: cannot retrieve trash path for '{file_name}': {exc}")
            succeeded = False
            continue
        try:
            move_to_trash(file_name, files_dir, info_dir)
        except TrashError as exc:
            _report(f"Error moving '{file_name}' to trash: {exc}")
            succeeded = False
    return 0 if succeeded else 1


def _run_restore(args: argparse.Namespace, settings: Settings) -> int:
    file_name = args.file
    try:
        files_dir, info_dir = trash_paths(file_name, settings)
    except OSError as exc:
        _report(f"Error: cannot retrieve trash path for '{file_name}': {exc}")
        return 1

    try:
        os.stat(files_dir / file_name)
    except FileNotFoundError:
        _report(f"Error: '{file_name}' does not exist in trash")
        return 1
    except OSError:
        _report(f"Error: cannot check if '{file_name}' exists in trash")
        return 1

    try:
        restore_from_trash(files_dir, info_dir, file_name)
    except TrashError as exc:
        _report(f"Error restoring '{file_name}': {exc}")
        return 1
    return 0


def _run_purge(args: argparse.Namespace, settings: Settings) -> int:
    home_dir = settings.home_dir
    try:
        empty_trash(home_dir, home_dir)
    except TrashError as exc:
        _report(f"Error purging trash: {exc}")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its list, remove, restore and purge commands."""
    parser = argparse.ArgumentParser(
        prog="trash",
        description=(
            "trash is a command-line utility that allows you to manage files and "
            "directories in the trash, based on the XDG Trash specification."
        ),
    )
    parser.set_defaults(handler=None)
    commands = parser.add_subparsers(dest="command", metavar="command")

    list_cmd = commands.add_parser(
        "list", aliases=["ls"], help="List files in the trash",
        description="List all files currently in the trash.",
    )
    list_cmd.add_argument(
        "-l", "--details", action="store_true", help="long listing format"
    )
    list_cmd.set_defaults(handler=_run_list)

    remove_cmd = commands.add_parser(
        "remove", aliases=["rm", "delete", "del"],
        help="Move a file or directory to the trash",
        description="Move specified files or directories to the trash.",
    )
    remove_cmd.add_argument("files", nargs="+", metavar="file")
    remove_cmd.set_defaults(handler=_run_remove)

    restore_cmd = commands.add_parser(
        "restore", help="Restore a file from the trash",
        description="Restore a file from the trash.",
    )
    restore_cmd.add_argument("file")
    restore_cmd.set_defaults(handler=_run_restore)

    purge_cmd = commands.add_parser(
        "purge", help="Empty the trash", description="Empty all files from the trash."
    )
    purge_cmd.set_defaults(handler=_run_purge)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the trash command and return its exit status."""
    try:
        settings = load_settings()
    except ValueError as exc:
        _report(str(exc))
        return 1
    except OSError as exc:
        _report(f"Error reading config file: {exc}")
        return 1

    try:
        ensure_dirs(settings)
    except OSError as exc:
        _report(f"Critical error: {exc}")
        return 1

    parser = build_parser()
    args = parser.parse_args(argv)
    handler: Optional[Handler] = args.handler
    if handler is None:
        parser.print_help()
        return 0
    return handler(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())