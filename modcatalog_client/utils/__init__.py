"""Utility modules for the ModCatalog client SDK."""

from .config_loader import load_config
from .data_masker import DataMasker
from .http_client import HttpClient
from .pagination import (
    build_pagination_params,
    on_dimension_change,
    parse_pagination_params,
    to_api_index,
    to_total_pages,
)
from .query_params import build_params, build_search_params

__all__ = [
    "HttpClient",
    "load_config",
    "DataMasker",
    "build_pagination_params",
    "build_params",
    "build_search_params",
    "on_dimension_change",
    "parse_pagination_params",
    "to_api_index",
    "to_total_pages",
]
