"""Internal HTTP client utility for upstream catalog communication.

This module provides the transport used by every endpoint wrapper. The API key
is passed per request in the ``x-api-key`` header, so one client serves any
number of credentials. This class is not meant to be used directly - use the
public HttpClient class instead which adds request logging.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from ..errors import CatalogClientError, ConnectionError
from ..models.config import CatalogClientConfig
from .http_error_handler import create_error_from_response

API_KEY_HEADER = "x-api-key"


class InternalHttpClient:
    """Internal HTTP client for the upstream catalog API.

    Contains the core HTTP functionality without logging. Wrapped by HttpClient
    which adds request logging.
    """

    def __init__(self, config: CatalogClientConfig):
        """Initialize internal HTTP client with configuration.

        Args:
            config: Client configuration

        """
        self.config = config
        self.client: Optional[httpx.AsyncClient] = None

    async def _initialize_client(self):
        """Initialize HTTP client if not already initialized."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )

    async def close(self):
        """Close the HTTP client."""
        if self.client:
            try:
                await self.client.aclose()
            except (RuntimeError, asyncio.CancelledError):
                # Event loop closed or cancelled during teardown
                pass
            finally:
                self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def _auth_headers(self, api_key: str, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        merged = dict(headers or {})
        merged[API_KEY_HEADER] = api_key
        return merged

    def _parse_response(self, response: httpx.Response) -> Any:
        if response.status_code >= 400:
            raise create_error_from_response(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise CatalogClientError(
                f"Invalid JSON response: {str(e)}", status_code=response.status_code
            )

    async def request(
        self,
        method: str,
        url: str,
        api_key: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make a request to the upstream.

        Args:
            method: HTTP method
            url: Request path relative to the base URL
            api_key: Credential sent in the ``x-api-key`` header
            params: Query parameters
            data: JSON body
            headers: Extra headers

        Returns:
            Response data (JSON parsed)

        Raises:
            CatalogClientError: If the upstream answers with a non-2xx status
            ConnectionError: If the upstream cannot be reached

        """
        await self._initialize_client()
        assert self.client is not None
        try:
            response = await self.client.request(
                method,
                url,
                params=params,
                json=data,
                headers=self._auth_headers(api_key, headers),
            )
        except httpx.RequestError as e:
            raise ConnectionError(f"Request failed: {str(e)}")
        return self._parse_response(response)

    async def get(
        self, url: str, api_key: str, params: Optional[Dict[str, Any]] = None, **kwargs
    ) -> Any:
        """Make GET request."""
        return await self.request("GET", url, api_key, params=params, **kwargs)

    async def post(
        self, url: str, api_key: str, data: Optional[Dict[str, Any]] = None, **kwargs
    ) -> Any:
        """Make POST request."""
        return await self.request("POST", url, api_key, data=data, **kwargs)
