"""
Error hierarchy.

Every error logs itself once on construction, at the level of its class,
together with the correlation/job ids active in the raising thread. The
same information is available afterwards through to_dict().

    PrimeFamiliesError
    ├── ArithmeticOverflowError   (DEBUG, always absorbed by predicates)
    ├── FatalError
    │   └── ClipboardError
    ├── ExecutionError            (stored on a failed streaming worker)
    ├── ValidationError           (WARNING)
    └── ConfigurationError
"""

import logging
from typing import Any, Dict, Optional

from primefamilies.common.logging import get_logger
from primefamilies.common.logging.correlation import get_correlation_id, get_job_id

logger = get_logger(__name__)


class PrimeFamiliesError(Exception):
    """Base class; carries structured `data`, an optional `cause` and trace ids."""

    log_level: int = logging.ERROR

    def __init__(
        self,
        message: str,
        data: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.data: Dict[str, Any] = dict(data or {})
        self.cause = cause
        self.correlation_id = get_correlation_id()
        self.job_id = get_job_id()
        self._emit()

    @property
    def kind(self) -> str:
        return type(self).__name__

    def _emit(self) -> None:
        payload = {"error_type": self.kind, **self.data}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        # traceback only at ERROR and above
        trace = self.cause if self.log_level >= logging.ERROR else None
        logger.log(self.log_level, self.message, data=payload, exc_info=trace)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.kind,
            "message": self.message,
            "data": self.data,
            "correlation_id": self.correlation_id,
            "job_id": self.job_id,
            "cause": None if self.cause is None else str(self.cause),
        }


class ArithmeticOverflowError(PrimeFamiliesError):
    """An intermediate value left the unsigned 64-bit domain."""
    log_level = logging.DEBUG


class FatalError(PrimeFamiliesError):
    """Unrecoverable environment failure; callers abort instead of retrying."""


class ClipboardError(FatalError):
    """The platform clipboard did not take the text."""


class ExecutionError(PrimeFamiliesError):
    """A streaming worker failed while computing or publishing."""


class ValidationError(PrimeFamiliesError):
    """Malformed request: bad bound, out-of-domain value or unknown family."""
    log_level = logging.WARNING


class ConfigurationError(PrimeFamiliesError):
    """An environment setting has an invalid value."""
