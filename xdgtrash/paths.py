"""Locating trash directories and reading .trashinfo files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from xdgtrash.config import Settings

TRASH_DIR_NAME = "Trash"
TRASH_INFO_EXT = ".trashinfo"
DEFAULT_PERMISSIONS = 0o700
INFO_FILE_PERMISSIONS = 0o600
LOCAL_SHARE_DIR_NAME = ".local/share"
TRASH_INFO_SECTION = "[Trash Info]"

PathLike = Union[str, Path]


@dataclass
class TrashInfo:
    """Contents of one .trashinfo file."""

    path: str = ""
    deletion_date: str = ""
    trash_file: str = ""


def home_trash_paths(
    settings: Settings, home: Optional[PathLike] = None
) -> Tuple[Path, Path]:
    """Files and info directories of the user's home trash."""
    base = Path(home) if home is not None else Path.home()
    trash_home = base / LOCAL_SHARE_DIR_NAME / TRASH_DIR_NAME
    return trash_home / settings.files_dir, trash_home / settings.info_dir


def top_trash_paths(top_directory: PathLike, settings: Settings) -> Tuple[Path, Path]:
    """Files and info directories of the trash under a top directory."""
    trash_dir = Path(top_directory) / TRASH_DIR_NAME
    return trash_dir / settings.files_dir, trash_dir / settings.info_dir


def trash_paths(
    file_to_trash: PathLike, settings: Settings, home: Optional[PathLike] = None
) -> Tuple[Path, Path]:
    """Choose the trash for a file: the nearest enclosing Trash directory, else the home trash."""
    if str(file_to_trash):
        abs_path = Path(os.path.abspath(file_to_trash))
        directory = abs_path if abs_path.is_dir() else abs_path.parent
        for candidate in (directory, *directory.parents):
            if candidate.parent == candidate:
                break
            if (candidate / TRASH_DIR_NAME).exists():
                return top_trash_paths(candidate, settings)
    return home_trash_paths(settings, home)


def parse_trash_info(info_file_path: PathLike) -> TrashInfo:
    """Read a .trashinfo file; raises OSError when it cannot be read."""
    path = Path(info_file_path)
    data = path.read_text(encoding="utf-8", errors="surrogateescape")
    info = TrashInfo(trash_file=path.name.removesuffix(TRASH_INFO_EXT))
    for raw_line in data.split("\n"):
        line = raw_line.strip()
        if line.startswith("Path="):
            info.path = line[len("Path="):]
        elif line.startswith("DeletionDate="):
            info.deletion_date = line[len("DeletionDate="):]
    return info