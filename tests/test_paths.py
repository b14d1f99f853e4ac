import pytest

from xdgtrash.config import Settings
from xdgtrash.paths import (
    TrashInfo,
    home_trash_paths,
    parse_trash_info,
    top_trash_paths,
    trash_paths,
)


@pytest.fixture
def settings(tmp_path):
    return Settings(home_dir=tmp_path / "ignored")


def test_home_trash_paths(tmp_path, settings):
    files, info = home_trash_paths(settings, home=tmp_path)
    base = tmp_path / ".local" / "share" / "Trash"
    assert files == base / "files"
    assert info == base / "info"


def test_home_trash_paths_uses_configured_names(tmp_path):
    settings = Settings(home_dir=tmp_path, files_dir="ff", info_dir="ii")
    files, info = home_trash_paths(settings, home=tmp_path)
    assert files.name == "ff"
    assert info.name == "ii"
    assert files.parent == info.parent


def test_top_trash_paths(tmp_path, settings):
    assert top_trash_paths(tmp_path, settings) == (
        tmp_path / "Trash" / "files",
        tmp_path / "Trash" / "info",
    )


def test_trash_paths_finds_enclosing_trash(tmp_path, settings):
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    target = nested / "file.txt"
    target.write_text("data", encoding="utf-8")
    (tmp_path / "a" / "Trash").mkdir()
    assert trash_paths(target, settings, home=tmp_path) == top_trash_paths(
        tmp_path / "a", settings
    )


def test_trash_paths_prefers_deepest(tmp_path, settings):
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / "a" / "Trash").mkdir()
    (nested / "Trash").mkdir()
    target = nested / "file.txt"
    target.write_text("data", encoding="utf-8")
    assert trash_paths(target, settings, home=tmp_path) == top_trash_paths(nested, settings)


def test_trash_paths_directory_checks_itself(tmp_path, settings):
    folder = tmp_path / "folder"
    (folder / "Trash").mkdir(parents=True)
    assert trash_paths(folder, settings, home=tmp_path) == top_trash_paths(folder, settings)


def test_trash_paths_missing_file_uses_parent(tmp_path, settings):
    (tmp_path / "d" / "Trash").mkdir(parents=True)
    target = tmp_path / "d" / "ghost.txt"
    assert trash_paths(target, settings, home=tmp_path) == top_trash_paths(
        tmp_path / "d", settings
    )


def test_trash_paths_falls_back_to_home(tmp_path, settings):
    target = tmp_path / "plain" / "file.txt"
    target.parent.mkdir()
    target.write_text("data", encoding="utf-8")
    home = tmp_path / "home"
    assert trash_paths(target, settings, home=home) == home_trash_paths(settings, home=home)


def test_trash_paths_empty_name_uses_home(tmp_path, settings):
    assert trash_paths("", settings, home=tmp_path) == home_trash_paths(settings, home=tmp_path)


def test_parse_trash_info(tmp_path):
    info_file = tmp_path / "abc.trashinfo"
    info_file.write_text(
        "[Trash Info]\nPath=/x/y.txt\nDeletionDate=2024-01-02T03:04:05Z\n",
        encoding="utf-8",
    )
    assert parse_trash_info(info_file) == TrashInfo(
        path="/x/y.txt", deletion_date="2024-01-02T03:04:05Z", trash_file="abc"
    )


def test_parse_trash_info_strips_whitespace(tmp_path):
    info_file = tmp_path / "id.trashinfo"
    info_file.write_text("  Path=/p/q  \r\n\tDeletionDate=d\n", encoding="utf-8")
    info = parse_trash_info(info_file)
    assert info.path == "/p/q"
    assert info.deletion_date == "d"


def test_parse_trash_info_without_keys(tmp_path):
    info_file = tmp_path / "bare.trashinfo"
    info_file.write_text("[Trash Info]\n", encoding="utf-8")
    assert parse_trash_info(info_file) == TrashInfo(trash_file="bare")


def test_parse_trash_info_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_trash_info(tmp_path / "nope.trashinfo")