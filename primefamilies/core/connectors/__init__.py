"""
Connectors - Store implementations.

- inmemory_cache.py: In-memory, thread-safe (memo table backing store)
"""

from .inmemory_cache import InMemoryCache

__all__ = [
    "InMemoryCache",
]
