"""JSON log formatting and the structured logger adapter."""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

# Package prefixes dropped when deriving the "component" field
_COMPONENT_PREFIXES = ("primefamilies", "modules")


def component_of(logger_name: str) -> str:
    """
    Short component name for a logger.

    Examples:
        primefamilies.modules.streaming.worker -> streaming.worker
        primefamilies.core.errors -> core.errors
        __main__ -> main
    """
    if logger_name == "__main__":
        return "main"
    parts = logger_name.split(".")
    for prefix in _COMPONENT_PREFIXES:
        if parts and parts[0] == prefix:
            parts = parts[1:]
    return ".".join(parts) or logger_name


def _exception_block(exc_info) -> Dict[str, Any]:
    exc_type, exc_value, _ = exc_info
    return {
        "type": exc_type.__name__ if exc_type else None,
        "message": str(exc_value) if exc_value else None,
        "traceback": traceback.format_exception(*exc_info),
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Always emits level, component, logger and message; adds timestamp,
    source path, correlation/job ids, structured data and exception info
    when enabled or present.
    """

    def __init__(
        self,
        include_timestamp: bool = True,
        include_path: bool = False,
        extra_fields: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_path = include_path
        self.extra_fields = dict(extra_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {}
        if self.include_timestamp:
            entry["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()

        entry["level"] = record.levelname
        entry["component"] = component_of(record.name)
        entry["logger"] = record.name
        if self.include_path:
            entry["path"] = f"{record.pathname}:{record.lineno}"
        entry["message"] = record.getMessage().strip()

        for field in ("correlation_id", "job_id"):
            value = getattr(record, field, None)
            if value:
                entry[field] = value

        data = getattr(record, "structured_data", None)
        if data:
            entry["data"] = data
        if record.exc_info:
            entry["exception"] = _exception_block(record.exc_info)

        entry.update(self.extra_fields)
        return json.dumps(entry, ensure_ascii=False, default=str)


class StructuredLogAdapter(logging.LoggerAdapter):
    """
    Logger adapter accepting a `data={...}` keyword on every call.

    Fields bound with bind() are attached to each record as attributes.

    Usage:
        logger = get_logger(__name__)
        logger.debug("Memo miss computed", data={"key": "twin:3:20", "hits": 4})
        logger.bind(job_id="twin:3:20").info("Streaming finished")
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def bind(self, **fields: Any) -> "StructuredLogAdapter":
        """New adapter over the same logger with extra record fields."""
        return StructuredLogAdapter(self.logger, {**self.extra, **fields})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        extra = {**self.extra, **kwargs.get("extra", {})}
        data = kwargs.pop("data", None)
        if data:
            extra["structured_data"] = data
        kwargs["extra"] = extra
        return msg, kwargs
