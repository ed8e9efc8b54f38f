"""
Roster cache package: the TTL-bounded ``CacheStore`` and its storage backends.
"""

from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from .store import GUEST_CACHE_TTL_MS, CacheStore

__all__ = [
    "CacheStore",
    "GUEST_CACHE_TTL_MS",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
]
