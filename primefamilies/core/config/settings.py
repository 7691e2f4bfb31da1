"""
Settings - Library configuration using dataclasses.

Environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
- LOG_JSON: true/false
- CLIPBOARD_ENABLED: true/false (clipboard copies fail fast when false)
- MEMO_LOCK_GRANULARITY: per_key, global
- STREAM_WORKER_DAEMON: true/false
"""

import os
from enum import Enum
from typing import Optional, Type, TypeVar
from dataclasses import dataclass, field

from ..errors import ConfigurationError


class LogLevel(str, Enum):
    """Log level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LockGranularity(str, Enum):
    """How the memo cache serializes computations on a miss."""
    PER_KEY = "per_key"
    GLOBAL = "global"


E = TypeVar("E", bound=Enum)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_enum(name: str, enum_cls: Type[E], default: str) -> E:
    raw = os.getenv(name, default)
    try:
        return enum_cls(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid value for {name}: {raw!r}",
            data={"variable": name, "allowed": [m.value for m in enum_cls]},
            cause=e,
        )


@dataclass
class Settings:
    """Library settings from environment."""

    # Logging
    log_level: LogLevel = field(
        default_factory=lambda: _env_enum("LOG_LEVEL", LogLevel, "INFO")
    )
    log_json: bool = field(
        default_factory=lambda: _env_bool("LOG_JSON", "false")
    )

    # Clipboard
    clipboard_enabled: bool = field(
        default_factory=lambda: _env_bool("CLIPBOARD_ENABLED", "false")
    )

    # Memo cache
    memo_lock_granularity: LockGranularity = field(
        default_factory=lambda: _env_enum(
            "MEMO_LOCK_GRANULARITY", LockGranularity, "per_key"
        )
    )

    # Streaming
    worker_daemon: bool = field(
        default_factory=lambda: _env_bool("STREAM_WORKER_DAEMON", "true")
    )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the singleton so the next call re-reads the environment."""
    global _settings
    _settings = None
