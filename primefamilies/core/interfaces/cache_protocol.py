"""
Cache Protocol - Interface for cache implementations.

Implementations:
- InMemoryCache (primefamilies.core.connectors.inmemory_cache)
- MemoCache (primefamilies.modules.families.memo) for MemoCacheProtocol
"""

from typing import Protocol, Optional, Any, Hashable, List, runtime_checkable


@runtime_checkable
class CacheProtocol(Protocol):
    """Protocol for key/value store implementations (DI interface)."""

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value by key."""
        ...

    def set(self, key: Hashable, value: Any) -> None:
        """Store value under key."""
        ...

    def exists(self, key: Hashable) -> bool:
        """Check if key exists."""
        ...

    def clear(self) -> None:
        """Clear all cache."""
        ...

    def size(self) -> int:
        """Number of stored entries."""
        ...


@runtime_checkable
class MemoCacheProtocol(Protocol):
    """Protocol for the family result memo table."""

    def get_or_compute(self, kind: Any, start: int, end: int) -> List[str]:
        """Return cached hits for (kind, start, end), computing on a miss."""
        ...

    def cache_entry_count(self) -> int:
        """Number of distinct stored keys."""
        ...
