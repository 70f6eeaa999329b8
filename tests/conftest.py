"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from analyzer.model import Country


@pytest.fixture()
def install_root(tmp_path: Path) -> Path:
    """Return a game install folder with an empty localisation directory."""
    root = tmp_path / 'Victoria 2'
    (root / 'localisation').mkdir(parents=True)
    return root


@pytest.fixture()
def write_localisation(install_root: Path) -> Callable[[str, bytes], Path]:
    """Return a helper writing raw bytes to a file in the localisation directory."""

    def write(name: str, content: bytes) -> Path:
        path = install_root / 'localisation' / name
        path.write_bytes(content)
        return path

    return write


@pytest.fixture()
def registry() -> dict[str, Country]:
    """Return a registry with a few known countries."""
    return {tag: Country(tag) for tag in ('ENG', 'FRA', 'PRU')}


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    cwd = tmp_path / 'cwd'
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
