"""Listing, trashing, restoring and emptying."""

from __future__ import annotations

import contextlib
import os
import shutil
import uuid
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterator, List, Union

from xdgtrash.paths import (
    DEFAULT_PERMISSIONS,
    INFO_FILE_PERMISSIONS,
    TRASH_INFO_EXT,
    TRASH_INFO_SECTION,
    TrashInfo,
    parse_trash_info,
)

PathLike = Union[str, Path]


class TrashError(Exception):
    """A trash operation could not be completed."""


def _base_name(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _rfc3339_now() -> str:
    now = datetime.now().astimezone().replace(microsecond=0)
    text = now.isoformat()
    if now.utcoffset() == timedelta(0):
        return text[:-6] + "Z"
    return text


def iter_trash(info_dir: PathLike) -> Iterator[TrashInfo]:
    """Yield the readable entries of an info directory in name order."""
    directory = Path(info_dir)
    try:
        names = sorted(os.listdir(directory))
    except FileNotFoundError:
        return
    except OSError as exc:
        raise TrashError(f"cannot read trash info directory {str(directory)!r}: {exc}") from exc
    for name in names:
        try:
            yield parse_trash_info(directory / name)
        except OSError:
            continue


def format_entry(info: TrashInfo, show_details: bool = False) -> str:
    """Render one entry as shown by the list command."""
    lines = [f"{_base_name(info.path)} -> {info.trash_file}"]
    if show_details:
        lines.append(f"    Path: {info.path}")
        lines.append(f"    Deletion Date: {info.deletion_date}")
    return "\n".join(lines)


def list_trash(info_dir: PathLike, show_details: bool = False) -> List[str]:
    """Formatted entries for everything in the trash."""
    return [format_entry(info, show_details) for info in iter_trash(info_dir)]


def _remove_all(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif os.path.lexists(path):
        path.unlink()


def empty_trash(files_dir: PathLike, info_dir: PathLike) -> None:
    """Remove the files and info directories entirely; missing ones are fine."""
    try:
        _remove_all(Path(files_dir))
    except OSError as exc:
        raise TrashError(f"cannot empty trash files: {exc}") from exc
    try:
        _remove_all(Path(info_dir))
    except OSError as exc:
        raise TrashError(f"cannot empty trash info: {exc}") from exc


def create_trash_info(original_path: PathLike, info_dir: PathLike, file_name: str) -> Path:
    """Write the .trashinfo file for a trashed item atomically and return its path."""
    directory = Path(info_dir)
    temp_path = directory / f"{file_name}{TRASH_INFO_EXT}.tmp"
    final_path = directory / f"{file_name}{TRASH_INFO_EXT}"

    try:
        directory.mkdir(mode=DEFAULT_PERMISSIONS, parents=True, exist_ok=True)
    except OSError as exc:
        raise TrashError(f"cannot create info directory '{directory}': {exc}") from exc

    content = f"{TRASH_INFO_SECTION}\nPath={original_path}\nDeletionDate={_rfc3339_now()}\n"
    try:
        try:
            fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, INFO_FILE_PERMISSIONS)
        except OSError as exc:
            raise TrashError(f"cannot create temp info file '{temp_path}': {exc}") from exc
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as handle:
            try:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            except OSError as exc:
                raise TrashError(f"cannot write to temp info file '{temp_path}': {exc}") from exc
        try:
            os.replace(temp_path, final_path)
        except OSError as exc:
            raise TrashError(
                f"cannot rename temp info file '{temp_path}' to '{final_path}': {exc}"
            ) from exc
    finally:
        with contextlib.suppress(OSError):
            temp_path.unlink()
    return final_path


def move_to_trash(source_path: PathLike, files_dir: PathLike, info_dir: PathLike) -> str:
    """Move a file or directory into the trash and return its trash identifier."""
    source = os.fspath(source_path)
    absolute_path = os.path.abspath(source)
    try:
        os.stat(source)
    except FileNotFoundError as exc:
        raise TrashError(f"{source} does not exist") from exc
    except OSError as exc:
        raise TrashError(f"error accessing file {source}: {exc}") from exc

    identifier = str(uuid.uuid4())
    destination = Path(files_dir) / identifier

    try:
        info_path = create_trash_info(absolute_path, info_dir, identifier)
    except TrashError as exc:
        raise TrashError(f"cannot create .trashinfo file for {source}: {exc}") from exc

    try:
        os.rename(source, destination)
    except OSError as exc:
        with contextlib.suppress(OSError):
            info_path.unlink()
        raise TrashError(f"cannot move {source} to trash: {exc}") from exc
    return identifier


def restore_from_trash(trash_dir: PathLike, info_dir: PathLike, filename: str) -> TrashInfo:
    """Move a trashed item back to where it came from and drop its info file."""
    info_path = Path(info_dir) / f"{filename}{TRASH_INFO_EXT}"
    trash_path = Path(trash_dir) / filename

    try:
        info = parse_trash_info(info_path)
    except OSError as exc:
        raise TrashError(f"cannot parse .trashinfo file: {exc}") from exc

    try:
        os.rename(trash_path, info.path)
    except OSError as exc:
        raise TrashError(f"cannot move file back to original location: {exc}") from exc

    try:
        info_path.unlink()
    except OSError as exc:
        raise TrashError(f"cannot remove .trashinfo file: {exc}") from exc
    return info