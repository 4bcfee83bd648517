"""Pydantic models for ModCatalog client configuration and catalog data."""

from .catalog import (
    FeaturedMods,
    Game,
    GameAssets,
    GameVersionGroup,
    GameVersionType,
    Mod,
    ModFile,
    SortField,
)
from .config import CatalogClientConfig
from .pagination import PageRequest, PaginatedResponse, PaginationMetadata, QueryState
from .query import QueryResult

__all__ = [
    "CatalogClientConfig",
    "FeaturedMods",
    "Game",
    "GameAssets",
    "GameVersionGroup",
    "GameVersionType",
    "Mod",
    "ModFile",
    "PageRequest",
    "PaginatedResponse",
    "PaginationMetadata",
    "QueryResult",
    "QueryState",
    "SortField",
]
