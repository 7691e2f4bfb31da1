"""
Streaming worker - cancellable incremental publishing of cached results.

One thread per request (no pool). The worker fetches the full result from
the memo cache, then republishes it element by element to its observer,
polling the cancel token before each element and asking the render surface
to redraw after every update.

State machine:
    RUNNING -> DONE              normal completion (progress ends at 1.0)
    RUNNING -> STOPPING -> DONE  cancelled (text replaced by STOPPED_SENTINEL,
                                 progress left as it was)
    RUNNING -> DONE              failed (worker.error set, text replaced by
                                 STOPPED_SENTINEL, progress left as it was)
"""

import threading
from enum import Enum
from typing import Optional, Tuple

from primefamilies.common.logging import get_logger
from primefamilies.common.logging.correlation import job_context
from primefamilies.core.config.settings import get_settings
from primefamilies.core.errors import ExecutionError
from primefamilies.core.interfaces import MemoCacheProtocol, ProgressObserver, RenderSurface
from primefamilies.modules.families.kinds import FamilyKind
from primefamilies.modules.families.memo import CacheKey, get_memo_cache
from .observers import CancelToken, NullRenderSurface, SharedOutput

logger = get_logger(__name__)

STOPPED_SENTINEL = "stopped"
SEPARATOR = ", "


class WorkerState(str, Enum):
    """Lifecycle of a streaming worker."""
    RUNNING = "running"
    STOPPING = "stopping"
    DONE = "done"


class StreamingWorker(threading.Thread):
    """Worker thread publishing one family range to an observer."""

    def __init__(
        self,
        kind: FamilyKind,
        start: int,
        end: int,
        cancel_token: Optional[CancelToken] = None,
        observer: Optional[ProgressObserver] = None,
        notifier: Optional[RenderSurface] = None,
        cache: Optional[MemoCacheProtocol] = None,
        daemon: Optional[bool] = None,
    ):
        """
        Args:
            kind: Family to stream
            start: Range bound (either order)
            end: Range bound (either order)
            cancel_token: Cancellation flag (fresh token if None)
            observer: Receives text and progress (fresh SharedOutput if None)
            notifier: Render surface asked to redraw after each update
            cache: Memo cache to read through (process-wide cache if None)
            daemon: Thread daemon flag (default from settings)
        """
        # Validate in the caller's thread so bad input fails fast
        self.key = CacheKey.normalized(kind, start, end)
        if daemon is None:
            daemon = get_settings().worker_daemon
        super().__init__(name=f"stream-{self.key.fingerprint}", daemon=daemon)

        self.cancel_token = cancel_token if cancel_token is not None else CancelToken()
        self.observer = observer if observer is not None else SharedOutput()
        self.notifier = notifier if notifier is not None else NullRenderSurface()
        self._cache = cache if cache is not None else get_memo_cache()

        self._state_lock = threading.Lock()
        self._state = WorkerState.RUNNING
        self.error: Optional[ExecutionError] = None

    @property
    def state(self) -> WorkerState:
        with self._state_lock:
            return self._state

    def _set_state(self, state: WorkerState) -> None:
        with self._state_lock:
            self._state = state

    def cancel(self) -> None:
        """Request a cooperative stop (honoured before the next element)."""
        self.cancel_token.cancel()

    def run(self):
        """Publish results in background."""
        with job_context(self.key.fingerprint):
            try:
                self._publish()
            except Exception as e:
                self.error = ExecutionError(
                    "Streaming worker failed",
                    data={"key": self.key.fingerprint},
                    cause=e,
                )
                self._signal_failure()
            finally:
                self._set_state(WorkerState.DONE)

    def _signal_failure(self) -> None:
        # terminal signal for pollers waiting on progress 1.0 or the sentinel
        try:
            self.observer.replace_text(STOPPED_SENTINEL)
            self.notifier.request_redraw()
        except Exception:
            logger.warning(
                "Could not publish failure to observer",
                data={"key": self.key.fingerprint},
                exc_info=True,
            )

    def _publish(self) -> None:
        results = self._cache.get_or_compute(self.key.kind, self.key.start, self.key.end)
        total = len(results)
        logger.debug("Streaming started", data={"key": self.key.fingerprint, "total": total})

        for index, text in enumerate(results):
            if self.cancel_token.is_cancelled:
                self._set_state(WorkerState.STOPPING)
                self.observer.replace_text(STOPPED_SENTINEL)
                self.notifier.request_redraw()
                logger.info(
                    "Streaming stopped",
                    data={"key": self.key.fingerprint, "emitted": index, "total": total},
                )
                return

            self.observer.append_text(text if index == 0 else SEPARATOR + text)
            self.observer.set_progress((index + 1) / total)
            self.notifier.request_redraw()

        self.observer.set_progress(1.0)
        self.notifier.request_redraw()
        logger.info("Streaming finished", data={"key": self.key.fingerprint, "total": total})


def start_streaming(
    kind: FamilyKind,
    start: int,
    end: int,
    cancel_token: CancelToken,
    observer: ProgressObserver,
    notifier: Optional[RenderSurface] = None,
    cache: Optional[MemoCacheProtocol] = None,
) -> StreamingWorker:
    """
    Spawn a worker for (kind, start, end) and return immediately.

    Args:
        kind: Family to stream
        start: Range bound (either order)
        end: Range bound (either order)
        cancel_token: Set it to stop the worker before its next element
        observer: Receives appended text and progress
        notifier: Render surface asked to redraw after each update
        cache: Memo cache (process-wide cache if None)

    Returns:
        The started StreamingWorker (join() it to wait)
    """
    worker = StreamingWorker(
        kind, start, end,
        cancel_token=cancel_token,
        observer=observer,
        notifier=notifier,
        cache=cache,
    )
    worker.start()
    return worker


def run_to_completion(
    kind: FamilyKind,
    start: int,
    end: int,
    cache: Optional[MemoCacheProtocol] = None,
    timeout: Optional[float] = None,
) -> Tuple[str, float]:
    """
    Stream a request synchronously and return the final (text, progress).

    Example:
        >>> run_to_completion(FamilyKind.MERSENNE, 2, 8)
        ('3, 7, 31, 127', 1.0)
    """
    output = SharedOutput()
    worker = start_streaming(kind, start, end, CancelToken(), output, cache=cache)
    worker.join(timeout)
    return output.snapshot()
