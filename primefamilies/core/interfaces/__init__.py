"""
Interfaces - Protocols for Dependency Injection.

These protocols define contracts that implementations must follow.
Use Protocol for type hints to enable loose coupling.

Example:
    def stream(cache: MemoCacheProtocol, observer: ProgressObserver):
        for i, hit in enumerate(cache.get_or_compute(kind, 2, 100)):
            observer.append_text(hit)
"""

from .cache_protocol import (
    CacheProtocol,
    MemoCacheProtocol,
)
from .observer_protocol import (
    ProgressObserver,
    RenderSurface,
)

__all__ = [
    # Cache
    'CacheProtocol',
    'MemoCacheProtocol',
    # Observers
    'ProgressObserver',
    'RenderSurface',
]
