"""Root logger setup and logger factory."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .correlation import CorrelationLogFilter
from .formatters import JSONFormatter, StructuredLogAdapter
from .logging_config import get_logging_config

CONSOLE_FORMAT = "%(asctime)s [%(job_id)s] %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _console_handler(level: int, json_format: bool, correlation: logging.Filter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(correlation)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(
    log_file: str,
    level: int,
    max_bytes: int,
    backup_count: int,
    correlation: logging.Filter,
) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.addFilter(correlation)
    handler.setFormatter(JSONFormatter(include_path=True))
    return handler


def _defaults_from_settings(component: str, level: Optional[str], json_format: Optional[bool]):
    if component != "default":
        return level, json_format
    # imported here: core.config.settings depends on this package
    from primefamilies.core.config.settings import get_settings
    settings = get_settings()
    if level is None and not get_logging_config().has_component(component):
        level = settings.log_level.value
    if json_format is None and settings.log_json:
        json_format = True
    return level, json_format


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 3,
    component: str = "default",
    force: bool = False,
) -> None:
    """
    Configure the root logger once per process.

    Args:
        level: Level name; None reads logging-config.yaml / settings
        log_file: Optional rotating JSON log file
        json_format: JSON console output; None reads config / LOG_JSON
        max_bytes: Rotation size for the log file
        backup_count: Rotated files to keep
        component: Component section of logging-config.yaml (default, worker, cache)
        force: Replace an existing configuration
    """
    global _configured
    if _configured and not force:
        return

    config = get_logging_config()
    level, json_format = _defaults_from_settings(component, level, json_format)
    if level is None:
        level = config.get_level(component)
    if json_format is None:
        json_format = config.get_json_format(component)
    numeric_level = logging.getLevelName(level.upper())

    correlation = CorrelationLogFilter()
    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(_console_handler(numeric_level, json_format, correlation))
    if log_file:
        root.addHandler(_file_handler(log_file, numeric_level, max_bytes, backup_count, correlation))

    for module_name, module_level in config.module_levels().items():
        logging.getLogger(module_name).setLevel(module_level)

    _configured = True


def get_logger(name: str) -> StructuredLogAdapter:
    """Structured logger for a module (usually __name__)."""
    return StructuredLogAdapter(logging.getLogger(name))
