"""
MemoCache - memo table for family range evaluations.

Keyed by the normalized (family, start, end) fingerprint. Entries are
immutable tuples stored once; readers get list copies.

Locking:
    PER_KEY (default): one lock per in-flight key, so unrelated keys compute
        concurrently while a given key is computed at most once.
    GLOBAL: one lock serializes every miss.

Usage:
    cache = MemoCache()
    hits = cache.get_or_compute(FamilyKind.TWIN, 3, 20)
    cache.cache_entry_count()  # 1
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from primefamilies.common.logging import get_logger
from primefamilies.core.config.settings import LockGranularity, get_settings
from primefamilies.core.config.cache import create_memo_store
from primefamilies.core.interfaces import CacheProtocol
from .evaluator import evaluate, normalize_range
from .kinds import FamilyKind

logger = get_logger(__name__)

Evaluator = Callable[[FamilyKind, int, int], List[str]]


class CacheKey(NamedTuple):
    """Normalized request fingerprint (start <= end)."""
    kind: FamilyKind
    start: int
    end: int

    @classmethod
    def normalized(cls, kind, start, end) -> "CacheKey":
        """Build a key, swapping reversed operands."""
        start, end = normalize_range(start, end)
        return cls(FamilyKind.parse(kind), start, end)

    @property
    def fingerprint(self) -> str:
        return f"{self.kind.value}:{self.start}:{self.end}"


@dataclass
class MemoStats:
    """Memo table statistics."""
    entries: int
    hits: int
    misses: int

    def to_dict(self) -> Dict:
        return {
            'entries': self.entries,
            'hits': self.hits,
            'misses': self.misses,
        }


class MemoCache:
    """
    Memoizing front for the range evaluator.

    Implements MemoCacheProtocol. Construct one per process (see
    get_memo_cache) or one per test, and inject it where needed.
    """

    def __init__(
        self,
        store: Optional[CacheProtocol] = None,
        granularity: Optional[LockGranularity] = None,
        evaluator: Evaluator = evaluate,
    ):
        """
        Args:
            store: Backing key/value store (default: create_memo_store())
            granularity: Miss serialization policy (default from settings)
            evaluator: Function computing a range on a miss
        """
        self._store = store if store is not None else create_memo_store()
        self._granularity = LockGranularity(
            granularity or get_settings().memo_lock_granularity
        )
        self._evaluate = evaluator

        self._global_lock = threading.Lock()
        self._locks_guard = threading.Lock()
        self._key_locks: Dict[CacheKey, threading.Lock] = {}

        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def granularity(self) -> LockGranularity:
        return self._granularity

    def _lock_for(self, key: CacheKey) -> threading.Lock:
        if self._granularity == LockGranularity.GLOBAL:
            return self._global_lock
        with self._locks_guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def _release_key_lock(self, key: CacheKey, lock: threading.Lock) -> None:
        # Late waiters still hold the old lock and re-check the store after acquiring it
        with self._locks_guard:
            if self._key_locks.get(key) is lock:
                del self._key_locks[key]

    def _record(self, hit: bool) -> None:
        with self._stats_lock:
            if hit:
                self._hits += 1
            else:
                self._misses += 1

    def get_or_compute(self, kind: FamilyKind, start: int, end: int) -> List[str]:
        """
        Return the hits for (kind, start, end), computing at most once per key.

        Operands may be reversed; the request and its reversed twin share
        one entry.

        Returns:
            New list with the cached hits in ascending order
        """
        key = CacheKey.normalized(kind, start, end)

        cached: Optional[Tuple[str, ...]] = self._store.get(key)
        if cached is not None:
            self._record(hit=True)
            logger.debug("Memo hit", data={"key": key.fingerprint})
            return list(cached)

        lock = self._lock_for(key)
        try:
            with lock:
                cached = self._store.get(key)
                if cached is not None:
                    self._record(hit=True)
                    logger.debug("Memo hit after wait", data={"key": key.fingerprint})
                    return list(cached)

                entry = tuple(self._evaluate(key.kind, key.start, key.end))
                self._store.set(key, entry)
                self._record(hit=False)
                logger.debug(
                    "Memo miss computed",
                    data={"key": key.fingerprint, "hits": len(entry)},
                )
        finally:
            if self._granularity == LockGranularity.PER_KEY:
                self._release_key_lock(key, lock)
        return list(entry)

    def contains(self, kind: FamilyKind, start: int, end: int) -> bool:
        """Check whether a request is already memoized."""
        return self._store.exists(CacheKey.normalized(kind, start, end))

    def cache_entry_count(self) -> int:
        """Number of distinct stored keys."""
        return self._store.size()

    def cache_stats(self) -> int:
        """Alias of cache_entry_count()."""
        return self.cache_entry_count()

    def stats(self) -> MemoStats:
        with self._stats_lock:
            return MemoStats(
                entries=self.cache_entry_count(),
                hits=self._hits,
                misses=self._misses,
            )

    def clear(self) -> None:
        """Drop every entry and reset counters."""
        self._store.clear()
        with self._stats_lock:
            self._hits = 0
            self._misses = 0
        logger.info("Memo cache cleared")


# Process-wide instance (lazy)
_memo_cache: Optional[MemoCache] = None
_memo_cache_lock = threading.Lock()


def get_memo_cache() -> MemoCache:
    """Get the process-wide memo cache, creating it on first use."""
    global _memo_cache
    with _memo_cache_lock:
        if _memo_cache is None:
            _memo_cache = MemoCache()
        return _memo_cache


def reset_memo_cache() -> None:
    """Forget the process-wide instance (next call builds a fresh one)."""
    global _memo_cache
    with _memo_cache_lock:
        _memo_cache = None


def get_or_compute(kind: FamilyKind, start: int, end: int) -> List[str]:
    """Cached evaluation through the process-wide memo cache."""
    return get_memo_cache().get_or_compute(kind, start, end)


def cache_entry_count() -> int:
    """Distinct keys in the process-wide memo cache."""
    return get_memo_cache().cache_entry_count()


def cache_stats() -> int:
    """Alias of cache_entry_count()."""
    return cache_entry_count()
