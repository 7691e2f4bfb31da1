"""
Families - prime family predicates, range evaluation and memoization.

- kinds.py:       FamilyKind enum
- arithmetic.py:  u64 domain, checked arithmetic, primality, sequence tables
- predicates.py:  per-family predicates + FAMILY_REGISTRY dispatch table
- evaluator.py:   evaluate(kind, start, end) range scan
- memo.py:        MemoCache (get_or_compute, cache_entry_count)
"""

from .kinds import FamilyKind
from .arithmetic import U64_MAX, is_prime
from .predicates import (
    FAMILY_REGISTRY,
    FamilyDef,
    FERMAT_MAX_INDEX,
    MERSENNE_MAX_EXPONENT,
    WILSON_LIMIT,
    family,
    get_family,
    test,
)
from .evaluator import evaluate, normalize_range
from .memo import (
    CacheKey,
    MemoCache,
    MemoStats,
    cache_entry_count,
    cache_stats,
    get_memo_cache,
    get_or_compute,
    reset_memo_cache,
)

__all__ = [
    'FamilyKind',
    'U64_MAX',
    'is_prime',
    'FAMILY_REGISTRY',
    'FamilyDef',
    'FERMAT_MAX_INDEX',
    'MERSENNE_MAX_EXPONENT',
    'WILSON_LIMIT',
    'family',
    'get_family',
    'test',
    'evaluate',
    'normalize_range',
    'CacheKey',
    'MemoCache',
    'MemoStats',
    'cache_entry_count',
    'cache_stats',
    'get_memo_cache',
    'get_or_compute',
    'reset_memo_cache',
]
