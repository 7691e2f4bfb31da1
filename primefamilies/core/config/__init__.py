"""
Config - Library configuration.

- settings.py: Dataclass settings from environment
- cache.py: Memo store / memo cache factories
"""

from .settings import Settings, LogLevel, LockGranularity, get_settings, reset_settings
from .cache import create_memo_store, create_memo_cache

__all__ = [
    # Settings
    "Settings",
    "LogLevel",
    "LockGranularity",
    "get_settings",
    "reset_settings",
    # Cache
    "create_memo_store",
    "create_memo_cache",
]
