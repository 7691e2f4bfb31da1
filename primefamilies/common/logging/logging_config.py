"""
Logging levels from logging-config.yaml.

Lookup order for a component setting:
    1. LOG_LEVEL_<COMPONENT> / LOG_JSON_FORMAT_<COMPONENT>
    2. LOG_LEVEL / LOG_JSON_FORMAT (default component only)
    3. components.<component> in the YAML file (a mapping or a bare level)
    4. default_level / false
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = "logging-config.yaml"
_SEARCH_DEPTH = 5
_TRUE = ("true", "1", "yes")


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Walk up from `start` (this package by default) looking for the YAML file."""
    current = start or Path(__file__).resolve().parent
    for _ in range(_SEARCH_DEPTH):
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        current = current.parent
    return None


def _env_for(prefix: str, component: str) -> Optional[str]:
    value = os.getenv(f"{prefix}_{component.upper().replace('-', '_')}")
    if value is None and component == "default":
        value = os.getenv(prefix)
    return value


class LoggingConfig:
    """Parsed logging-config.yaml with environment overrides."""

    _instance: Optional["LoggingConfig"] = None

    def __init__(self, config_path: Optional[str] = None):
        path = Path(config_path) if config_path else find_config_file()
        if path is not None and path.exists():
            with open(path, encoding="utf-8") as f:
                self._config: Dict[str, Any] = yaml.safe_load(f) or {}
        else:
            self._config = {}

    @classmethod
    def get_instance(cls) -> "LoggingConfig":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def _component(self, component: str) -> Dict[str, Any]:
        raw = (self._config.get("components") or {}).get(component)
        if isinstance(raw, str):
            return {"level": raw}
        return raw if isinstance(raw, dict) else {}

    def has_component(self, component: str) -> bool:
        """True if the YAML file configures this component."""
        return component in (self._config.get("components") or {})

    def get_level(self, component: str = "default") -> str:
        """Level name (DEBUG, INFO, ...) for a component."""
        level = (
            _env_for("LOG_LEVEL", component)
            or self._component(component).get("level")
            or self._config.get("default_level", "INFO")
        )
        return str(level).upper()

    def get_json_format(self, component: str = "default") -> bool:
        """Whether console output for a component is JSON."""
        env = _env_for("LOG_JSON_FORMAT", component)
        if env is not None:
            return env.lower() in _TRUE
        return bool(self._component(component).get("json_format", False))

    def get_module_level(self, module_name: str) -> Optional[str]:
        """Level pinned for one module, e.g. 'primefamilies.modules.families.memo'."""
        return self.module_levels().get(module_name)

    def module_levels(self) -> Dict[str, str]:
        modules = self._config.get("modules") or {}
        return {name: str(level).upper() for name, level in modules.items()}


def get_logging_config() -> LoggingConfig:
    """Process-wide LoggingConfig."""
    return LoggingConfig.get_instance()
