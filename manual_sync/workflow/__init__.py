"""
Workflow package for manual-sync.

Runs the per-system manual synchronization and collects run statistics.
"""

from .progress import SyncStats, MissingManualsReport, print_summary
from .synchronizer import ManualSynchronizer, SyncMode, sync_manuals

__all__ = [
    'SyncStats',
    'MissingManualsReport',
    'print_summary',
    'ManualSynchronizer',
    'SyncMode',
    'sync_manuals',
]
