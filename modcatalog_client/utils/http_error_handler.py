"""HTTP error handler utilities for InternalHttpClient.

Turns non-2xx upstream responses into CatalogClientError subclasses, keeping
the upstream message verbatim.
"""

from typing import Any, Dict, Optional, Type

import httpx

from ..errors import AuthenticationError, CatalogClientError, NotFoundError, RateLimitError
from .data_masker import DataMasker

# Keys the upstream uses for a human readable message, in priority order
_MESSAGE_KEYS = ("errorMessage", "message", "error", "title", "detail")


def parse_error_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
    """Parse a JSON error body, returning None for non-JSON responses."""
    content_type = response.headers.get("content-type", "")
    if "json" not in content_type:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def extract_error_message(response: httpx.Response, body: Optional[Dict[str, Any]]) -> str:
    """
    Pick the most specific message available.

    Args:
        response: Upstream response
        body: Parsed JSON body, if any

    Returns:
        Upstream message, response text, or the HTTP reason phrase
    """
    if body:
        for key in _MESSAGE_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    text = response.text.strip() if response.text else ""
    return text or response.reason_phrase or "Request failed"


def error_class_for_status(status_code: int) -> Type[CatalogClientError]:
    if status_code in (401, 403):
        return AuthenticationError
    if status_code == 404:
        return NotFoundError
    if status_code == 429:
        return RateLimitError
    return CatalogClientError


def create_error_from_response(response: httpx.Response) -> CatalogClientError:
    """
    Create the error matching an upstream status code.

    Args:
        response: Non-2xx upstream response

    Returns:
        CatalogClientError subclass with message ``"HTTP <status>: <message>"``
    """
    body = parse_error_body(response)
    message = extract_error_message(response, body)
    error_class = error_class_for_status(response.status_code)
    return error_class(
        f"HTTP {response.status_code}: {message}",
        status_code=response.status_code,
        error_body=DataMasker.mask_sensitive_data(body) if body is not None else None,
    )
