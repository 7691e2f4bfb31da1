"""
Observers and notifiers for streaming workers.

SharedOutput is the reference ProgressObserver: text and progress guarded
by one lock, written by a single worker and read by any number of threads.
"""

import threading
from typing import Callable, Tuple


class CancelToken:
    """Cooperative cancellation flag shared between a requester and its worker."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def __bool__(self) -> bool:
        return self.is_cancelled


class SharedOutput:
    """
    Thread-safe accumulated output text and progress fraction.

    Implements ProgressObserver. Reads return snapshots.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._text = ""
        self._progress = 0.0

    def append_text(self, text: str) -> None:
        with self._lock:
            self._text += text

    def replace_text(self, text: str) -> None:
        with self._lock:
            self._text = text

    def set_progress(self, fraction: float) -> None:
        with self._lock:
            self._progress = fraction

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    @property
    def progress(self) -> float:
        with self._lock:
            return self._progress

    def snapshot(self) -> Tuple[str, float]:
        """Consistent (text, progress) pair."""
        with self._lock:
            return self._text, self._progress


class NullRenderSurface:
    """RenderSurface that ignores redraw requests."""

    def request_redraw(self) -> None:
        pass


class CallbackRenderSurface:
    """RenderSurface adapter around a plain callable (e.g. a Qt signal's emit)."""

    def __init__(self, callback: Callable[[], None]):
        self._callback = callback

    def request_redraw(self) -> None:
        self._callback()
