"""Run settings for manual-sync."""

from .settings import SyncSettings, SettingsError

__all__ = [
    'SyncSettings',
    'SettingsError',
]
