"""
Prime Families - prime family catalogue with memoized, streamable range scans.

Structure:
- common/    - Shared utilities (logging)
- core/      - Library core (config, errors, interfaces, connectors, adapters)
- modules/   - Domain modules (families, streaming)
"""

__version__ = "1.0.0"

from primefamilies.modules.families import (
    FamilyKind,
    MemoCache,
    cache_entry_count,
    evaluate,
    get_or_compute,
)
from primefamilies.modules.streaming import (
    CancelToken,
    SharedOutput,
    StreamingWorker,
    WorkerState,
    run_to_completion,
    start_streaming,
)

__all__ = [
    'FamilyKind',
    'MemoCache',
    'cache_entry_count',
    'evaluate',
    'get_or_compute',
    'CancelToken',
    'SharedOutput',
    'StreamingWorker',
    'WorkerState',
    'run_to_completion',
    'start_streaming',
]
