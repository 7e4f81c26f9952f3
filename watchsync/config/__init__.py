"""
Config helpers for harvest and replay runs.
"""

from watchsync.config.loader import get_watch_sync_settings, load_env_files
from watchsync.config.models import (
    CLASS_MATCH_MODES,
    ListingMarkup,
    WatchSyncSettings,
)

__all__ = [
    "CLASS_MATCH_MODES",
    "ListingMarkup",
    "WatchSyncSettings",
    "get_watch_sync_settings",
    "load_env_files",
]
