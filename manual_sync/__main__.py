"""Allow running as ``python -m manual_sync``."""

import sys

from manual_sync.cli import main

if __name__ == "__main__":
    sys.exit(main())
