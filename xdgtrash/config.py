"""Loading and preparing the trash configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

DEFAULT_FILES_DIR = "files"
DEFAULT_INFO_DIR = "info"
DIR_PERMISSIONS = 0o700

PathLike = Union[str, Path]


@dataclass
class Settings:
    """Where the trash lives and how its sub-directories are named."""

    home_dir: Path
    files_dir: str = DEFAULT_FILES_DIR
    info_dir: str = DEFAULT_INFO_DIR

    def files_path(self) -> Path:
        """Directory holding the trashed files themselves."""
        return Path(self.home_dir) / self.files_dir

    def info_path(self) -> Path:
        """Directory holding the .trashinfo files."""
        return Path(self.home_dir) / self.info_dir


def _home(home: Optional[PathLike]) -> Path:
    return Path(home) if home is not None else Path.home()


def default_config_path(home: Optional[PathLike] = None) -> Path:
    """Location of the configuration file for the given home directory."""
    return _home(home) / ".config" / "trash-cli" / "config.yaml"


def _lookup(mapping: Mapping[Any, Any], key: str) -> Any:
    wanted = key.lower()
    return next(
        (value for name, value in mapping.items() if str(name).lower() == wanted),
        None,
    )


def load_settings(
    config_path: Optional[PathLike] = None, home: Optional[PathLike] = None
) -> Settings:
    """Read settings from a YAML file, falling back to defaults when it is absent.

    Raises ValueError when the file exists but cannot be understood.
    """
    home_path = _home(home)
    settings = Settings(home_dir=home_path / ".local" / "share" / "Trash")
    path = Path(config_path) if config_path is not None else default_config_path(home_path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return settings

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Error reading config file: {exc}") from exc

    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ValueError("Error reading config file: top level is not a mapping")

    section = _lookup(data, "trash")
    if not isinstance(section, dict):
        return settings

    home_dir = _lookup(section, "homeDir")
    if home_dir is not None:
        settings.home_dir = Path(str(home_dir))
    files_dir = _lookup(section, "filesDir")
    if files_dir is not None:
        settings.files_dir = str(files_dir)
    info_dir = _lookup(section, "infoDir")
    if info_dir is not None:
        settings.info_dir = str(info_dir)
    return settings


def ensure_dirs(settings: Settings) -> None:
    """Create the files and info directories with owner-only permissions."""
    for label, path in (("files", settings.files_path()), ("info", settings.info_path())):
        try:
            path.mkdir(mode=DIR_PERMISSIONS, parents=True, exist_ok=True)
        except OSError as exc:
            raise OSError(f"error creating {label} directory: {exc}") from exc