"""Library root discovery."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from manual_sync.config.settings import SyncSettings

logger = logging.getLogger(__name__)


class ScannerError(Exception):
    """Library scanning errors."""
    pass


def file_exists(path: Path) -> bool:
    """True if `path` exists and is a regular file."""
    return path.exists() and path.is_file()


def dir_exists(path: Path) -> bool:
    """True if `path` exists and is a directory."""
    return path.exists() and path.is_dir()


def list_subdirectories(directory: Path) -> List[str]:
    """
    List names of the immediate sub-directories of `directory`.

    Not recursive and not sorted: names come back in filesystem order.
    A missing directory yields an empty list.

    Raises:
        ScannerError: If the directory can't be listed
    """
    if not dir_exists(directory):
        return []

    try:
        return [entry.name for entry in directory.iterdir() if entry.is_dir()]
    except PermissionError as e:
        raise ScannerError(f"Permission denied listing directory: {directory}") from e
    except OSError as e:
        raise ScannerError(f"Failed to list directory {directory}: {e}") from e


@dataclass
class LibraryRoot:
    """
    One system directory (e.g. "snes") below the ROMs directory.

    Holds the gamelist.xml and media/manuals paths derived from the
    directory name.
    """
    name: str
    path: Path
    gamelist_path: Path
    manuals_dir: Path

    @classmethod
    def from_directory(cls, base_dir: Path, name: str, settings: SyncSettings) -> "LibraryRoot":
        path = base_dir / name
        return cls(
            name=name,
            path=path,
            gamelist_path=path / settings.gamelist_filename,
            manuals_dir=path / settings.manuals_subdir,
        )

    def is_valid(self) -> bool:
        """A root is processed only when it has both gamelist.xml and a manuals folder."""
        return file_exists(self.gamelist_path) and dir_exists(self.manuals_dir)

    def qualify(self, game_path: str) -> str:
        """Game path prefixed with the root name, as shown in logs and reports."""
        return f"{self.name}/{game_path}"


def list_library_roots(base_dir: Path, settings: SyncSettings) -> List[LibraryRoot]:
    """
    Enumerate candidate library roots.

    Every immediate sub-directory is a candidate; validity is checked by
    the caller with LibraryRoot.is_valid().

    Args:
        base_dir: ROMs directory (normally the working directory)
        settings: Run settings

    Returns:
        List of LibraryRoot objects in filesystem order
    """
    names = list_subdirectories(base_dir)
    logger.debug(f"Found {len(names)} sub-directories in {base_dir}")
    return [LibraryRoot.from_directory(base_dir, name, settings) for name in names]
