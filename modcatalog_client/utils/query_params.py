"""
Query parameter builder for catalog list endpoints.

Builds the exact parameter map the upstream expects from the user-facing
query state and page position. Fields the upstream treats as absent are left
out instead of being sent empty.
"""

from typing import Any, Dict, Optional

from ..errors import ConfigurationError
from ..models.pagination import PageRequest, QueryState
from .pagination import to_api_index


def is_search_active(search_filter: Optional[str]) -> bool:
    """True when the filter has non-whitespace content."""
    return bool(search_filter and search_filter.strip())


def require_positive_id(name: str, value: Any) -> int:
    """
    Validate a scoping id such as ``gameId``.

    Accepts positive ints and strings holding one.

    Raises:
        ConfigurationError: If the value is missing or not a positive integer
    """
    if value is None or isinstance(value, bool):
        raise ConfigurationError(f"{name} is required")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
        parsed = int(value.strip())
    else:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    if parsed < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return parsed


def build_page_params(
    page: Optional[PageRequest] = None, defaults: Optional[PageRequest] = None
) -> Dict[str, Any]:
    """Build ``index`` and ``pageSize``, falling back to ``defaults``."""
    effective = page or defaults or PageRequest()
    return {"index": to_api_index(effective), "pageSize": effective.page_size}


def build_params(
    state: Optional[QueryState] = None,
    page: Optional[PageRequest] = None,
    defaults: Optional[PageRequest] = None,
) -> Dict[str, Any]:
    """
    Build upstream query parameters from query state and page position.

    ``index`` and ``pageSize`` are always present. ``searchFilter`` is only
    included when it has non-whitespace content, and is then sent as typed.
    ``sortField`` and ``sortOrder`` are only included when set.

    Args:
        state: Search and sort state (None means no filter, upstream ordering)
        page: Page position (None uses ``defaults``)
        defaults: Page position used when ``page`` is omitted

    Returns:
        Parameter map for the upstream request

    Examples:
        >>> build_params(QueryState(search_filter="  "), PageRequest(page_index=1, page_size=10))
        {'index': 10, 'pageSize': 10}
    """
    params = build_page_params(page, defaults)
    if state is None:
        return params

    if is_search_active(state.search_filter):
        params["searchFilter"] = state.search_filter
    if state.sort_field is not None:
        params["sortField"] = int(state.sort_field)
    if state.sort_order is not None:
        params["sortOrder"] = state.sort_order
    return params


def build_search_params(
    game_id: Any,
    state: Optional[QueryState] = None,
    page: Optional[PageRequest] = None,
    defaults: Optional[PageRequest] = None,
) -> Dict[str, Any]:
    """
    Build parameters for the game-scoped mod search.

    Raises:
        ConfigurationError: If ``game_id`` is missing or not a positive integer
    """
    params = {"gameId": require_positive_id("gameId", game_id)}
    params.update(build_params(state, page, defaults))
    return params
