"""
Streaming - cancellable incremental publishing of memoized results.

- observers.py: CancelToken, SharedOutput, render surface adapters
- worker.py:    StreamingWorker thread, start_streaming, run_to_completion
"""

from .observers import (
    CancelToken,
    SharedOutput,
    NullRenderSurface,
    CallbackRenderSurface,
)
from .worker import (
    SEPARATOR,
    STOPPED_SENTINEL,
    StreamingWorker,
    WorkerState,
    run_to_completion,
    start_streaming,
)

__all__ = [
    'CancelToken',
    'SharedOutput',
    'NullRenderSurface',
    'CallbackRenderSurface',
    'SEPARATOR',
    'STOPPED_SENTINEL',
    'StreamingWorker',
    'WorkerState',
    'run_to_completion',
    'start_streaming',
]
