"""
Shared pytest fixtures for ModCatalog client tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from modcatalog_client import CatalogClient, CatalogClientConfig
from modcatalog_client.api import ApiClient
from modcatalog_client.services.query_cache import QueryCache
from modcatalog_client.utils.http_client import HttpClient


@pytest.fixture
def config():
    """Test configuration without retry delay."""
    return CatalogClientConfig(
        base_url="https://api.example.test/v1",
        log_level="debug",
        retry_delay=0,
    )


@pytest.fixture
def mock_http_client(config):
    """Mock HTTP client."""
    http_client = MagicMock(spec=HttpClient)
    http_client.config = config
    http_client.get = AsyncMock(return_value={})
    http_client.post = AsyncMock(return_value={})
    http_client.request = AsyncMock(return_value={})
    http_client.close = AsyncMock()
    return http_client


@pytest.fixture
def api_client(mock_http_client):
    """API client over the mocked HTTP client."""
    return ApiClient(mock_http_client)


@pytest.fixture
def query_cache():
    """Query cache without retry delay."""
    return QueryCache(stale_time=300, retry=1, retry_delay=0)


@pytest.fixture
def client(config, mock_http_client):
    """CatalogClient whose HTTP layer is mocked."""
    catalog_client = CatalogClient(config)
    catalog_client.http_client = mock_http_client
    catalog_client.api_client = ApiClient(mock_http_client)
    return catalog_client
