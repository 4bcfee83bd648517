"""
SDK exceptions and error handling.

This module defines custom exceptions for the ModCatalog client SDK.
"""


class CatalogClientError(Exception):
    """Base exception for ModCatalog client errors."""

    def __init__(
        self, message: str, status_code: int | None = None, error_body: dict | None = None
    ):
        """
        Initialize catalog client error.

        Args:
            message: Error message (preserved verbatim from the upstream/transport)
            status_code: HTTP status code if applicable
            error_body: Sanitized error response body (credentials masked)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_body = error_body


class AuthenticationError(CatalogClientError):
    """Raised when the upstream rejects the API key."""

    pass


class NotFoundError(CatalogClientError):
    """Raised when the upstream answers 404."""

    pass


class RateLimitError(CatalogClientError):
    """Raised when the upstream answers 429."""

    pass


class ConnectionError(CatalogClientError):
    """Raised when the upstream cannot be reached."""

    pass


class ConfigurationError(CatalogClientError):
    """Raised when configuration or a required request parameter is invalid."""

    pass
