"""
Correlation context for tracing work across threads.

Two context variables travel with every log record:
    correlation_id - caller-chosen trace id (optional)
    job_id         - the streaming request fingerprint, e.g. "twin:3:20"

A new thread starts with an empty context, so workers set their own job id
via job_context() inside run().
"""

import contextvars
import logging
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

correlation_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)
job_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "job_id", default=None
)


def generate_correlation_id() -> str:
    """Short random trace id (8 hex chars)."""
    return uuid.uuid4().hex[:8]


def get_correlation_id() -> Optional[str]:
    return correlation_id_var.get()


def set_correlation_id(cid: Optional[str]) -> None:
    correlation_id_var.set(cid)


def get_job_id() -> Optional[str]:
    return job_id_var.get()


def set_job_id(jid: Optional[str]) -> None:
    job_id_var.set(jid)


def clear_context() -> None:
    """Forget both ids in the current context."""
    correlation_id_var.set(None)
    job_id_var.set(None)


@contextmanager
def job_context(job_id: str, correlation_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind a job id (and optionally a correlation id) for the duration of a block.

    Usage:
        with job_context("mersenne:2:8"):
            logger.info("Streaming started")
    """
    job_token = job_id_var.set(job_id)
    cid_token = correlation_id_var.set(correlation_id or correlation_id_var.get())
    try:
        yield job_id
    finally:
        correlation_id_var.reset(cid_token)
        job_id_var.reset(job_token)


class CorrelationLogFilter(logging.Filter):
    """Copies the context ids onto every record passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get()
        record.job_id = job_id_var.get()
        return True
