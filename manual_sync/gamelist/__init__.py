"""
Gamelist package for manual-sync.

Handles loading, editing and saving ES-DE gamelist.xml files.
"""

from .game_entry import GameEntry, iter_game_entries
from .parser import GamelistDocument, GamelistError, load_gamelist, save_gamelist

__all__ = [
    'GameEntry',
    'iter_game_entries',
    'GamelistDocument',
    'GamelistError',
    'load_gamelist',
    'save_gamelist',
]
