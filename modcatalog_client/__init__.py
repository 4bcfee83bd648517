"""
ModCatalog client - async Python SDK for browsing a game-mod catalog.

This package wraps the CurseForge-style catalog REST API: list games, search
and sort mods within a game, inspect mods and page through their files. It
adds a deduplicating, staleness-aware query cache and the pagination state a
list view binds to.
"""

from .client import CatalogClient
from .errors import (
    AuthenticationError,
    CatalogClientError,
    ConfigurationError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)
from .models.catalog import (
    FeaturedMods,
    Game,
    GameVersionType,
    Mod,
    ModFile,
    SortField,
)
from .models.config import CatalogClientConfig
from .models.pagination import PageRequest, PaginatedResponse, PaginationMetadata, QueryState
from .models.query import QueryResult
from .services.credential_store import CredentialStore, FileStorage, MemoryStorage
from .services.pagination_state import PaginationState
from .services.query_cache import CacheKey, QueryCache, QueryObserver
from .utils.config_loader import load_config

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "AuthenticationError",
    "CacheKey",
    "CatalogClient",
    "CatalogClientConfig",
    "CatalogClientError",
    "ConfigurationError",
    "ConnectionError",
    "CredentialStore",
    "FeaturedMods",
    "FileStorage",
    "Game",
    "GameVersionType",
    "MemoryStorage",
    "Mod",
    "ModFile",
    "NotFoundError",
    "PageRequest",
    "PaginatedResponse",
    "PaginationMetadata",
    "PaginationState",
    "QueryCache",
    "QueryObserver",
    "QueryResult",
    "QueryState",
    "RateLimitError",
    "SortField",
    "load_config",
]
