"""
Public HTTP client for upstream catalog communication with request logging.

This module wraps InternalHttpClient and logs every request through the
standard library logger. The API key is never logged.
"""

import logging
import time
from typing import Any, Dict, Optional

from ..models.config import CatalogClientConfig
from .data_masker import DataMasker
from .internal_http_client import InternalHttpClient

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Public HTTP client for the upstream catalog API.

    Adds to InternalHttpClient:
    - Debug logging of method, path, masked parameters, status and duration
      when log_level is 'debug'
    - Warning logs for failed requests
    """

    def __init__(self, config: CatalogClientConfig):
        """
        Initialize public HTTP client with configuration.

        Args:
            config: Client configuration
        """
        self.config = config
        self._internal_client = InternalHttpClient(config)

    async def close(self):
        """Close the HTTP client."""
        await self._internal_client.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def _log_request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]],
        error: Optional[Exception],
        start_time: float,
    ) -> None:
        duration_ms = int((time.perf_counter() - start_time) * 1000)
        if error is not None:
            logger.warning(
                "%s %s failed after %dms: %s",
                method,
                url,
                duration_ms,
                getattr(error, "message", str(error)),
            )
            return
        if self.config.log_level != "debug":
            return
        logger.debug(
            "%s %s params=%s completed in %dms",
            method,
            url,
            DataMasker.mask_sensitive_data(params or {}),
            duration_ms,
        )

    async def request(
        self,
        method: str,
        url: str,
        api_key: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make a request with logging.

        Args:
            method: HTTP method
            url: Request path
            api_key: Credential for this request
            params: Query parameters
            data: JSON body

        Returns:
            Response data (JSON parsed)

        Raises:
            CatalogClientError: If request fails
        """
        start_time = time.perf_counter()
        try:
            response = await self._internal_client.request(
                method, url, api_key, params=params, data=data
            )
        except Exception as e:
            self._log_request(method, url, params, e, start_time)
            raise
        self._log_request(method, url, params, None, start_time)
        return response

    async def get(self, url: str, api_key: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request with logging."""
        return await self.request("GET", url, api_key, params=params)

    async def post(self, url: str, api_key: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """Make POST request with logging."""
        return await self.request("POST", url, api_key, data=data)
