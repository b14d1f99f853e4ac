# xdgtrash

A command-line utility for managing files and directories in the trash,
based on the XDG Trash specification.

Instead of deleting files outright, `trash` moves them into a trash
directory and records where they came from in a `.trashinfo` file, so they
can be listed and restored later.

## Installation

```
pip install .
```

This installs the `trash` command. Running it with no command prints the
help text.

## Usage

Move one or more files or directories to the trash:

```
trash remove notes.txt old-project/
```

`rm`, `delete` and `del` are accepted as aliases of `remove`. Each trashed
item is renamed to a random UUID inside the trash's `files` directory, and a
matching `<uuid>.trashinfo` file is written to its `info` directory holding
the item's absolute original path and the deletion time (RFC 3339, local
time with offset). If any item cannot be trashed, the others are still
processed and the command exits with status 1.

List what is in the home trash:

```
trash list
trash ls -l
```

Entries are shown in name order as `original-name -> identifier`. With
`-l` / `--details`, the original path and deletion date are printed as well.
Info files that cannot be read are skipped. The listing is written to
standard error.

Restore an item by its identifier:

```
trash restore 3f2b9c1e-8d4a-4a57-9c2e-0d1f6a7b8c9d
```

The item is moved back to the path recorded in its `.trashinfo` file, and
the info file is removed. The trash searched is chosen the same way as for
`remove`, starting from the current directory.

Empty the trash completely:

```
trash purge
```

This deletes the configured trash home directory (`homeDir`) with
everything in it.

All commands exit with status 1 on failure and print the error to standard
error.

## Where the trash lives

On start, the `files` and `info` directories under the configured `homeDir`
(by default `~/.local/share/Trash`) are created if missing, with owner-only
permissions.

When a file is trashed, its directory and each directory above it (up to,
but not including, `/`) are checked for a `Trash` subdirectory; the nearest
one found is used, with items going into `Trash/<filesDir>` and metadata
into `Trash/<infoDir>`. If none is found, `~/.local/share/Trash` is used.
`trash list` always reads `~/.local/share/Trash/<infoDir>`.

## Configuration

Settings are read from `~/.config/trash-cli/config.yaml` if it exists:

```yaml
trash:
  homeDir: /home/me/.local/share/Trash
  filesDir: files
  infoDir: info
```

Every key is optional and key names are matched without regard to case;
missing keys take the defaults above. A file that is not valid YAML, or
whose top level is not a mapping, is an error.

## Limitations

- Items are moved with a plain rename, so trashing or restoring across
  filesystems fails; nothing is copied.
- Original paths are stored as they are, without percent-encoding.
- Per-user `.Trash-<uid>` directories are not used, and the `files`
  directory of a `Trash` found above a file is not created automatically.

## Using it from Python

```python
from pathlib import Path

from xdgtrash.config import load_settings, ensure_dirs
from xdgtrash.operations import move_to_trash, iter_trash, format_entry, restore_from_trash

home = Path.home()
settings = load_settings(None, home)
ensure_dirs(settings)

identifier = move_to_trash("scratch.txt", settings.files_path(), settings.info_path())
for info in iter_trash(settings.info_path()):
    print(format_entry(info, True))

restore_from_trash(settings.files_path(), settings.info_path(), identifier)
```

`xdgtrash.paths` offers `trash_paths`, `home_trash_paths`,
`top_trash_paths` and `parse_trash_info`; `xdgtrash.operations` also has
`list_trash`, `empty_trash` and `create_trash_info`. Failures in the
operations raise `TrashError`.