"""
Localisation loader for Victoria II.

Reads the game's `localisation/*.csv` files and fills in the official names of
countries already known to the analyzer. The files are semicolon separated and
encoded as ISO-8859-1:

    ENG;United Kingdom;Royaume-Uni;Vereinigtes Königreich;...;x

Only the first two columns (tag and English name) are used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from analyzer.const import (
    LOCALISATION_DIR,
    LOCALISATION_ENCODING,
    LOCALISATION_SEPARATOR,
    LOCALISATION_SUFFIX,
)
from analyzer.log import log

if TYPE_CHECKING:
    from collections.abc import Mapping


class OfficialNamed(Protocol):
    """Registry entry whose official name can be set."""

    def set_official_name(self, name: str) -> None: ...


class LocalisationDirError(OSError):
    """The localisation directory could not be listed."""


def parse_row(line: str) -> list[str]:
    """Split a localisation line into fields.

    No quoting, escaping or trimming. Trailing empty fields are dropped, so
    `ENG;` is a single-field row.
    """
    fields = line.split(LOCALISATION_SEPARATOR)
    while fields and not fields[-1]:
        fields.pop()
    return fields


def list_localisation_files(install_root: str | Path) -> list[Path]:
    """List the `.csv` files directly under `<install_root>/localisation`.

    Raises:
        LocalisationDirError: If the directory is missing or cannot be read.
    """
    folder = Path(install_root) / LOCALISATION_DIR
    try:
        entries = list(folder.iterdir())
    except OSError as e:
        log.error(f'Failed to list files in directory: {folder}')
        raise LocalisationDirError(f'Failed to list files in directory: {folder}') from e

    files = [
        entry for entry in entries if entry.is_file() and entry.name.lower().endswith(LOCALISATION_SUFFIX)
    ]
    return sorted(files)


def read_csv(path: str | Path, registry: Mapping[str, OfficialNamed]) -> int:
    """Apply one localisation file to the registry.

    Rows are applied top to bottom, so a later row for a tag wins.

    Returns:
        Number of official names set.
    """
    updated = 0
    # newline=None accepts LF, CRLF and CR
    with open(path, encoding=LOCALISATION_ENCODING, newline=None) as f:
        for line in f:
            if line.endswith('\n'):
                line = line[:-1]
            fields = parse_row(line)
            if len(fields) < 2:
                continue
            tag = fields[0]
            if tag not in registry:
                continue
            registry[tag].set_official_name(fields[1])
            updated += 1
    return updated


def load_localisation(install_root: str | Path, registry: Mapping[str, OfficialNamed]) -> None:
    """Set official names for every registered country found in the localisation files.

    The registry is mutated in place; tags are never added or removed. A file
    that cannot be read aborts the load, keeping the names already applied.
    """
    files = list_localisation_files(install_root)
    log.debug(f'Found {len(files)} localisation files under {install_root}')

    for path in files:
        updated = read_csv(path, registry)
        log.debug(f'{path.name}: {updated} official names set')
