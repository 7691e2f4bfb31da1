"""
InMemoryCache - lock-guarded dict store behind the memo table.

Entries are written once and live until clear(); nothing survives the
process.
"""

import threading
from typing import Any, Dict, Hashable, Optional


class InMemoryCache:
    """
    CacheProtocol over a plain dict.

    Every public call takes the same lock, so readers never observe a
    half-written mapping. Empty values such as () are real entries.
    """

    def __init__(self):
        self._store: Dict[Hashable, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            return self._store.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._store[key] = value

    def exists(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._store

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._store)
