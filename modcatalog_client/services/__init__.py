"""Service implementations for the ModCatalog client SDK."""

from .credential_store import CredentialStore, FileStorage, MemoryStorage
from .pagination_state import PaginationState
from .query_cache import CacheKey, QueryCache, QueryObserver, build_cache_key

__all__ = [
    "CacheKey",
    "CredentialStore",
    "FileStorage",
    "MemoryStorage",
    "PaginationState",
    "QueryCache",
    "QueryObserver",
    "build_cache_key",
]
