"""
Manual file lookup.

A game's manual is expected at media/manuals/<rom stem><ext>, trying each
configured extension in order (.pdf before .txt by default).
"""

from dataclasses import dataclass
from pathlib import Path, PureWindowsPath
from typing import Iterator, Optional

from manual_sync.config.settings import SyncSettings
from manual_sync.library.scanner import LibraryRoot, file_exists


def get_filename_base(game_path: str) -> str:
    """
    Filename without directory or extension.

    "./sub/Foo (USA).sfc" -> "Foo (USA)". Backslash separators are accepted
    so gamelists written on Windows resolve the same way.
    """
    return PureWindowsPath(game_path).stem


@dataclass(frozen=True)
class ManualCandidate:
    """A possible manual location for one game."""
    gamelist_value: str  # Value written to <manual>, relative to the gamelist
    file_path: Path  # Location checked on disk

    def exists(self) -> bool:
        return file_exists(self.file_path)


def iter_candidates(
    root: LibraryRoot,
    game_path: str,
    settings: SyncSettings
) -> Iterator[ManualCandidate]:
    """Yield manual candidates for `game_path` in extension priority order."""
    base = get_filename_base(game_path)
    for ext in settings.manual_extensions:
        filename = f"{base}{ext}"
        yield ManualCandidate(
            gamelist_value=f"{settings.manual_prefix}{filename}",
            file_path=root.manuals_dir / filename,
        )


def find_manual(
    root: LibraryRoot,
    game_path: str,
    settings: SyncSettings
) -> Optional[ManualCandidate]:
    """
    Find the manual for a game.

    Args:
        root: Library root holding the game
        game_path: Value of the game's <path> element
        settings: Run settings

    Returns:
        First candidate that exists on disk, or None
    """
    for candidate in iter_candidates(root, game_path, settings):
        if candidate.exists():
            return candidate
    return None
