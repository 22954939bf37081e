"""
Run statistics and reporting.

Counts what happened across all library roots, writes the missing manuals
report and prints the final summary.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TextIO

from rich.console import Console

logger = logging.getLogger(__name__)


@dataclass
class SyncStats:
    """Run-wide counters."""
    added: int = 0
    existing: int = 0
    missing: int = 0
    removed: int = 0
    roots_processed: int = 0
    roots_skipped: int = 0
    files_written: int = 0


class MissingManualsReport:
    """
    Text file listing games without a manual, one "<root>/<game path>" per line.

    Opened once per run and truncated on open, so an empty file means
    nothing was missing.
    """

    def __init__(self, report_path: Path):
        self.report_path = report_path
        self._file: Optional[TextIO] = None

    def open(self) -> "MissingManualsReport":
        self._file = open(self.report_path, 'w', encoding='utf-8', newline='\n')
        logger.debug(f"Writing missing manuals to {self.report_path}")
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "MissingManualsReport":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def add(self, line: str) -> None:
        """Append one line to the report."""
        if self._file is None:
            raise RuntimeError("Missing manuals report is not open")
        self._file.write(f"{line}\n")


def summary_lines(stats: SyncStats, remove: bool) -> List[str]:
    """Summary lines for the given mode."""
    if remove:
        return [f"{stats.removed} Manuals removed from gamelist.xml"]
    return [
        f"{stats.added} Manuals added to gamelist.xml",
        f"{stats.existing} Existing xml manual tags in gamelist.xml",
        f"{stats.missing} Missing manual files",
    ]


def print_summary(stats: SyncStats, remove: bool, console: Optional[Console] = None) -> None:
    """
    Print the end-of-run summary.

    Args:
        stats: Accumulated counters
        remove: True for a REMOVE run, False for ADD
        console: Rich console to print to (default: stdout)
    """
    console = console or Console(highlight=False)

    console.print()
    for line in summary_lines(stats, remove):
        console.print(line, markup=False, soft_wrap=True)

    logger.debug(
        f"Roots processed: {stats.roots_processed}, skipped: {stats.roots_skipped}, "
        f"gamelists written: {stats.files_written}"
    )
