"""
Shared pytest fixtures and utilities for the manual-sync test suite.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

import pytest

from manual_sync.config.settings import SyncSettings


GameSpec = Tuple[Optional[str], Optional[str]]


def gamelist_xml(games: Iterable[GameSpec]) -> str:
    """
    Build a tab-indented gamelist.xml from (path, manual) pairs.

    None leaves the element out; each game also gets a <name>.
    """
    lines = ['<?xml version="1.0"?>', '<gameList>']
    for path, manual in games:
        lines.append('\t<game>')
        if path is not None:
            lines.append(f'\t\t<path>{path}</path>')
        lines.append('\t\t<name>Game</name>')
        if manual is not None:
            lines.append(f'\t\t<manual>{manual}</manual>')
        lines.append('\t</game>')
    lines.append('</gameList>')
    return "\n".join(lines) + "\n"


@pytest.fixture
def settings() -> SyncSettings:
    return SyncSettings()


@pytest.fixture
def roms_dir(tmp_path: Path) -> Path:
    """
    Empty ROMs directory inside the temp workspace.
    """
    path = tmp_path / "roms"
    path.mkdir()
    return path


@pytest.fixture
def make_system(roms_dir: Path) -> Callable[..., Path]:
    """
    Create a system directory below roms_dir.

    Usage:
        snes = make_system("snes", games=[("./Foo.sfc", None)], manuals=["Foo.pdf"])
    """

    def _builder(
        name: str,
        games: Optional[List[GameSpec]] = None,
        manuals: Optional[List[str]] = None,
        gamelist_text: Optional[str] = None,
        with_manuals_dir: bool = True,
    ) -> Path:
        system = roms_dir / name
        system.mkdir()

        if gamelist_text is not None:
            (system / "gamelist.xml").write_text(gamelist_text, encoding="utf-8")
        elif games is not None:
            (system / "gamelist.xml").write_text(gamelist_xml(games), encoding="utf-8")

        if with_manuals_dir:
            manuals_dir = system / "media" / "manuals"
            manuals_dir.mkdir(parents=True)
            for filename in manuals or []:
                (manuals_dir / filename).write_bytes(b"%PDF-1.4\n")

        return system

    return _builder
