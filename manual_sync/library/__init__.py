"""
Library scanning package for manual-sync.

Finds system directories (library roots) and the manual files inside them.
"""

from .scanner import LibraryRoot, list_library_roots
from .manuals import ManualCandidate, find_manual

__all__ = [
    'LibraryRoot',
    'list_library_roots',
    'ManualCandidate',
    'find_manual',
]
