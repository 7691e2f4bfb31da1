"""Logging utilities: structured adapter, JSON output, correlation context."""

from .logger import setup_logging, get_logger
from .logging_config import LoggingConfig, get_logging_config
from .formatters import JSONFormatter, StructuredLogAdapter, component_of
from .correlation import (
    CorrelationLogFilter,
    clear_context,
    generate_correlation_id,
    get_correlation_id,
    get_job_id,
    job_context,
    set_correlation_id,
    set_job_id,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'LoggingConfig',
    'get_logging_config',
    'JSONFormatter',
    'StructuredLogAdapter',
    'component_of',
    'CorrelationLogFilter',
    'clear_context',
    'generate_correlation_id',
    'get_correlation_id',
    'get_job_id',
    'job_context',
    'set_correlation_id',
    'set_job_id',
]
