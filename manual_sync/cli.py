"""Command-line interface for manual-sync."""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from manual_sync import __version__
from manual_sync.config.settings import SyncSettings, SettingsError
from manual_sync.library.scanner import ScannerError
from manual_sync.workflow.progress import print_summary
from manual_sync.workflow.synchronizer import ManualSynchronizer, SyncMode

logger = logging.getLogger(__name__)

BANNER = """\
manual-sync : add game manuals to ES-DE gamelist.xml files
This program reads the roms sub-directories for gamelist.xml files and checks for the existence of a manual tag in the xml file.
If the manual tag does not exist and there is a manual file in the media/manuals directory with the same name as the game
it adds a <manual> xml tag to the xml file.  If it doesn't find a manual file it writes the game name to missing_manuals.txt.
Run this program in the roms directory.

Skraper can scrape manuals but it doesn't add the path to the manual as an
xml tag in gamelist.xml.  If you have scraped manuals with Skraper you can
run this program in the roms folder to add them all to the gamelist.xml files.
You only need to do this once until you add more games and run Skraper again.

A -r option will remove the manual tags if it points to media/manuals.
This is useful to test the add function or add again from scratch.

-r will not remove any manual tags that do not point to the media/manuals directory
as the add routine will only add manual tags back in that are in the media/manuals directory.
This is to prevent removing manual tags that were added manually or in some other way.
For example the manual tags in PICOwesome point to a different directory and the gamelist.xml
is created using its own program specially made for PICOwesome.
"""


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='manual-sync',
        usage='%(prog)s [-r]',
        allow_abbrev=False,
        description='Add or remove <manual> tags in ES-DE gamelist.xml files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Options:
  -r, -R     Remove manual tags that point to media/manuals
             (only when it is the single argument)

Examples:
  # Add manual tags for every system below the current ROMs directory
  cd /path/to/roms && manual-sync

  # Remove manual tags pointing to media/manuals
  cd /path/to/roms && manual-sync -r
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def select_mode(argv: List[str]) -> SyncMode:
    """
    Pick the sync mode from the raw argument list.

    Only a single "-r" (any case) selects REMOVE; every other combination,
    including "-r" with extra arguments, runs ADD.
    """
    if len(argv) == 1 and argv[0].lower() == '-r':
        return SyncMode.REMOVE
    return SyncMode.ADD


def _setup_logging(level: int = logging.INFO) -> None:
    """
    Setup console logging.

    Progress lines are INFO records written to stdout without decoration.
    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))

    logging.basicConfig(
        level=level,
        handlers=[console_handler],
        force=True  # Override any existing configuration
    )


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for manual-sync CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    console = Console(highlight=False)
    console.print(BANNER, markup=False, soft_wrap=True)

    # Unknown arguments are ignored, they simply fall back to ADD
    parser = create_parser()
    parser.parse_known_args(argv)
    mode = select_mode(argv)

    settings = SyncSettings()
    try:
        settings.validate()
    except SettingsError as e:
        print(f"Settings error: {e}", file=sys.stderr)
        return 1

    _setup_logging()
    logger.debug(f"Mode: {mode.value}, ROMs directory: {Path.cwd()}")

    try:
        synchronizer = ManualSynchronizer(Path.cwd(), settings)
        stats = synchronizer.run(mode)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130
    except ScannerError as e:
        print(f"Error scanning ROMs directory: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\nFatal error: {e}", file=sys.stderr)
        return 1

    print_summary(stats, remove=mode is SyncMode.REMOVE, console=console)
    return 0


if __name__ == '__main__':
    sys.exit(main())
