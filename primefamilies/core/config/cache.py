"""
Cache Factory - Create memo stores and caches based on configuration.

Uses factory pattern for dependency injection.
"""

from typing import Optional

from ..interfaces import CacheProtocol
from .settings import LockGranularity, get_settings


def create_memo_store() -> CacheProtocol:
    """
    Factory for the memo table's backing store.

    Only an in-process store is offered: the memo table is never persisted
    or shared between processes.
    """
    from ..connectors.inmemory_cache import InMemoryCache
    return InMemoryCache()


def create_memo_cache(granularity: Optional[LockGranularity] = None):
    """
    Build a MemoCache wired with a fresh store.

    Args:
        granularity: Miss serialization policy (default from settings)

    Example:
        cache = create_memo_cache()
        cache = create_memo_cache(LockGranularity.GLOBAL)
    """
    from primefamilies.modules.families.memo import MemoCache

    settings = get_settings()
    return MemoCache(
        store=create_memo_store(),
        granularity=granularity or settings.memo_lock_granularity,
    )
