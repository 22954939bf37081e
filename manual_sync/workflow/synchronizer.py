"""
Manual synchronization across library roots.

Walks each system directory, adds <manual> tags for games whose manual file
exists in media/manuals (ADD) or strips the tags that point there (REMOVE),
and rewrites gamelist.xml only when something changed.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from manual_sync.config.settings import SyncSettings
from manual_sync.gamelist.game_entry import GameEntry, iter_game_entries
from manual_sync.gamelist.parser import GamelistError, load_gamelist, save_gamelist
from manual_sync.library.manuals import find_manual
from manual_sync.library.scanner import LibraryRoot, list_library_roots
from manual_sync.workflow.progress import MissingManualsReport, SyncStats

logger = logging.getLogger(__name__)


class SyncMode(Enum):
    """Synchronization direction."""
    ADD = "add"
    REMOVE = "remove"


class ManualSynchronizer:
    """
    Adds or removes <manual> tags in every gamelist.xml below a ROMs directory.

    ADD never overwrites an existing manual. REMOVE only touches manuals whose
    value contains the managed folder name ("media/manuals"), so tags pointing
    elsewhere (hand-made gamelists, other tools) are kept.
    """

    def __init__(self, base_dir: Path, settings: Optional[SyncSettings] = None):
        """
        Initialize synchronizer.

        Args:
            base_dir: ROMs directory holding one sub-directory per system
            settings: Run settings (defaults if omitted)
        """
        self.base_dir = Path(base_dir)
        self.settings = settings or SyncSettings()

    @property
    def report_path(self) -> Path:
        return self.base_dir / self.settings.report_filename

    def run(self, mode: SyncMode) -> SyncStats:
        """
        Process all library roots.

        Args:
            mode: SyncMode.ADD or SyncMode.REMOVE

        Returns:
            Counters for the whole run
        """
        stats = SyncStats()

        if mode is SyncMode.REMOVE:
            self._run_roots(stats, self.remove_manuals)
            return stats

        with MissingManualsReport(self.report_path) as report:
            self._run_roots(
                stats,
                lambda root, entry, run_stats: self.add_manual(root, entry, run_stats, report)
            )
        return stats

    def _run_roots(
        self,
        stats: SyncStats,
        handle_entry: Callable[[LibraryRoot, GameEntry, SyncStats], bool]
    ) -> None:
        for root in list_library_roots(self.base_dir, self.settings):
            try:
                if not root.is_valid():
                    logger.debug(f"Skipping {root.name}: no gamelist.xml or manuals directory")
                    continue
                self.sync_root(root, stats, handle_entry)
            except OSError as e:
                # Unsaved edits to this root are dropped, printed counts stay
                logger.error(f"Skipping {root.name}: {e}")
                stats.roots_skipped += 1

    def sync_root(
        self,
        root: LibraryRoot,
        stats: SyncStats,
        handle_entry: Callable[[LibraryRoot, GameEntry, SyncStats], bool]
    ) -> bool:
        """
        Apply `handle_entry` to every game of one root and save if anything changed.

        Args:
            root: Library root with a gamelist.xml
            stats: Run counters
            handle_entry: Per-game policy, returns True when it changed the entry

        Returns:
            True if the gamelist was rewritten

        Raises:
            OSError: If a manual lookup fails; the gamelist is left unwritten
        """
        try:
            document = load_gamelist(root.gamelist_path)
        except GamelistError as e:
            logger.debug(f"Skipping {root.name}: {e}")
            stats.roots_skipped += 1
            return False

        modified = False

        for entry in iter_game_entries(document.getroot()):
            if not entry.path:
                continue
            if handle_entry(root, entry, stats):
                modified = True

        stats.roots_processed += 1
        if not modified:
            return False

        try:
            save_gamelist(document, root.gamelist_path)
        except GamelistError as e:
            logger.error(f"Could not update {root.gamelist_path}: {e}")
            return False

        stats.files_written += 1
        return True

    def add_manual(
        self,
        root: LibraryRoot,
        entry: GameEntry,
        stats: SyncStats,
        report: MissingManualsReport
    ) -> bool:
        """
        ADD policy for one game.

        Returns:
            True if a <manual> element was added
        """
        qualified = root.qualify(entry.path)

        if entry.manual:
            logger.info(f"Manual tag already exists for {qualified}")
            stats.existing += 1
            return False

        candidate = find_manual(root, entry.path, self.settings)
        if candidate is None:
            logger.info(f"No manual found for {qualified}")
            report.add(qualified)
            stats.missing += 1
            return False

        entry.add_manual(candidate.gamelist_value)
        logger.info(f"Added manual for {qualified}")
        stats.added += 1
        return True

    def remove_manuals(self, root: LibraryRoot, entry: GameEntry, stats: SyncStats) -> bool:
        """
        REMOVE policy for one game.

        Plain substring test on the manual value; anything not containing the
        pattern is left alone.

        Returns:
            True if a <manual> element was removed
        """
        if not entry.manual or self.settings.remove_pattern not in entry.manual:
            return False

        entry.remove_manual()
        logger.info(f"Manual tag removed for {root.qualify(entry.path)}")
        stats.removed += 1
        return True


def sync_manuals(
    base_dir: Path,
    mode: SyncMode = SyncMode.ADD,
    settings: Optional[SyncSettings] = None
) -> SyncStats:
    """
    Run one synchronization pass.

    Args:
        base_dir: ROMs directory
        mode: SyncMode.ADD (default) or SyncMode.REMOVE
        settings: Run settings (defaults if omitted)

    Returns:
        Counters for the run
    """
    return ManualSynchronizer(base_dir, settings).run(mode)
