"""
Save game and install folder discovery for Victoria II.

The folders chosen by the user are kept in `paths.txt` in the working
directory (save game folder on the first line, install folder on the second).
Without that file the usual Windows locations are probed.
"""

from __future__ import annotations

import getpass
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from analyzer.const import PATHS_ENCODING, PATHS_FILE, ROOT_PREFIXES, SAVE_GAME_FOLDER, VERSIONS
from analyzer.log import log

if TYPE_CHECKING:
    from collections.abc import Iterator


class PathsWriteError(OSError):
    """The paths file could not be written."""


@dataclass(frozen=True)
class PathPair:
    """Save game and install folders. An empty string means unknown."""

    save_game_dir: str = ''
    install_dir: str = ''

    def __iter__(self) -> Iterator[str]:
        yield self.save_game_dir
        yield self.install_dir


def is_directory(path: str | Path) -> bool:
    """Check that `path` is an existing directory. Errors count as missing."""
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def check_save_game_folder(user: str | None = None) -> str:
    """Return the default save game folder for `user` if it exists, else ''."""
    if user is None:
        try:
            user = getpass.getuser()
        except (KeyError, OSError):
            # KeyError before Python 3.13, OSError after
            log.debug('No OS user name, skipping save game folder')
            return ''
    folder = SAVE_GAME_FOLDER.format(user=user)
    if is_directory(folder):
        log.debug(f'Found save game folder: {folder}')
        return folder
    log.debug(f'Save game folder not found: {folder}')
    return ''


def candidate_install_paths() -> Iterator[str]:
    """Yield install folder candidates, every root for a version before the next version."""
    for version in VERSIONS:
        for prefix in ROOT_PREFIXES:
            yield prefix + version


def check_install_folder() -> str:
    """Return the first existing install folder candidate, else ''."""
    for path in candidate_install_paths():
        if is_directory(path):
            log.debug(f'Found install folder: {path}')
            return path
    log.debug('No install folder found')
    return ''


def read_paths(paths_file: str | Path = PATHS_FILE) -> PathPair:
    """Read the stored folders. Missing lines are read as ''."""
    with open(paths_file, encoding=PATHS_ENCODING, newline=None) as f:
        lines = [line[:-1] if line.endswith('\n') else line for line in f]
    lines += [''] * (2 - len(lines))
    return PathPair(lines[0], lines[1])


def resolve(paths_file: str | Path = PATHS_FILE, user: str | None = None) -> PathPair:
    """Get the save game and install folders.

    Stored folders are returned as-is, whether or not they exist. Otherwise
    each folder is probed and left empty when not found.
    """
    if Path(paths_file).exists():
        log.debug(f'Reading folders from {paths_file}')
        return read_paths(paths_file)
    return PathPair(check_save_game_folder(user), check_install_folder())


def save_paths(save_game_dir: str, install_dir: str, paths_file: str | Path = PATHS_FILE) -> None:
    """Store the folders, replacing any previous ones.

    Raises:
        PathsWriteError: If the file cannot be written.
    """
    try:
        with open(paths_file, 'w', encoding=PATHS_ENCODING, newline='\n') as f:
            f.write(f'{save_game_dir}\n{install_dir}')
    except OSError as e:
        raise PathsWriteError(f'Could not save the {Path(paths_file).name}.') from e
    log.info(f'Saved folders to {paths_file}')


def directory_of(path: str) -> str:
    """Return `path` up to and including the last '/', or `path` if it has none.

    Examples:
        'C:/saves/autosave.v2' -> 'C:/saves/'
        'C:/saves/'            -> 'C:/saves/'
        'autosave.v2'          -> 'autosave.v2'
    """
    index = path.rfind('/')
    return path[: index + 1] if index > -1 else path
