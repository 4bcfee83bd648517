"""Pagination utilities for the ModCatalog client SDK.

The UI works with a zero-based page number and a page size; the upstream works
with an absolute item index and a page size. These helpers convert between the
two, compute page counts from the upstream total and encode/decode the page
position carried in the URL query string.
"""

from typing import Any, Dict, Iterable, Optional

from ..models.pagination import PageRequest

DEFAULT_PAGE_INDEX = 0
DEFAULT_PAGE_SIZE = 20


def to_api_index(page: PageRequest) -> int:
    """Absolute item offset sent to the upstream.

    Examples:
        >>> to_api_index(PageRequest(page_index=2, page_size=20))
        40

    """
    return page.page_index * page.page_size


def to_total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` items.

    Zero items yield zero pages, which callers render as an empty state rather
    than "page 1 of 0". A non-positive page size also yields zero pages.

    Examples:
        >>> to_total_pages(45, 20)
        3
        >>> to_total_pages(0, 20)
        0

    """
    if page_size <= 0 or total_count <= 0:
        return 0
    return -(-total_count // page_size)


def on_dimension_change(page: PageRequest) -> PageRequest:
    """Reset to the first page, keeping the page size.

    Must be applied whenever the search filter, sort field, sort order or page
    size changes, otherwise the new result set may present an out-of-range page.
    """
    return page.model_copy(update={"page_index": 0})


def page_index_from_api_index(index: int, page_size: int) -> int:
    """Zero-based page containing the item at ``index``."""
    if page_size <= 0 or index <= 0:
        return 0
    return index // page_size


def can_go_next(page_index: int, total_pages: int, disabled: bool = False) -> bool:
    return not disabled and page_index < total_pages - 1


def can_go_previous(page_index: int, disabled: bool = False) -> bool:
    return not disabled and page_index > 0


def _coerce_int(value: Any) -> Optional[int]:
    """Int or integer string to int; anything else (floats, "40.0") is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_pagination_params(
    params: Dict[str, Any],
    default_index: int = DEFAULT_PAGE_INDEX,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    page_size_options: Optional[Iterable[int]] = None,
) -> PageRequest:
    """Parse ``index`` and ``pageSize`` URL query parameters into a PageRequest.

    Values may be ints or integer strings such as ``"40"``. Floats and
    float-like strings such as ``"40.0"`` are invalid. Missing or invalid values
    fall back to the defaults; so does a page size outside
    ``page_size_options`` when options are given. ``index`` is the absolute
    item index, as produced by :func:`build_pagination_params`.

    Examples:
        >>> parse_pagination_params({"index": "40", "pageSize": "20"})
        PageRequest(page_index=2, page_size=20)
        >>> parse_pagination_params({"index": "abc"})
        PageRequest(page_index=0, page_size=20)

    """
    page_size = _coerce_int(params.get("pageSize", params.get("page_size")))
    if page_size is None or page_size < 1:
        page_size = default_page_size
    if page_size_options is not None and page_size not in set(page_size_options):
        page_size = default_page_size

    index = _coerce_int(params.get("index"))
    if index is None or index < 0:
        index = default_index

    return PageRequest(
        page_index=page_index_from_api_index(index, page_size),
        page_size=page_size,
    )


def build_pagination_params(page: PageRequest) -> Dict[str, str]:
    """Encode a PageRequest as URL query parameters.

    Examples:
        >>> build_pagination_params(PageRequest(page_index=2, page_size=20))
        {'index': '40', 'pageSize': '20'}

    """
    return {"index": str(to_api_index(page)), "pageSize": str(page.page_size)}
