"""
Pagination state for one paginated list view.

Holds the user-facing search, sort and page position of a list, reconciles it
with the upstream pagination metadata and enforces the rules that keep the
two consistent:

- any change of search filter, sort field, sort order or page size moves back
  to the first page in the same transition;
- "next" is allowed while page_index < total_pages - 1, "previous" while
  page_index > 0, and neither while a fetch is pending.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from ..errors import ConfigurationError
from ..models.catalog import SortField
from ..models.pagination import PageRequest, PaginationMetadata, QueryState, SortOrder
from ..utils.pagination import (
    DEFAULT_PAGE_SIZE,
    build_pagination_params,
    can_go_next,
    can_go_previous,
    on_dimension_change,
    parse_pagination_params,
    to_api_index,
    to_total_pages,
)
from ..utils.query_params import is_search_active

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE_OPTIONS = (10, 20, 50)


class PaginationState:
    """Search, sort and page position of a list view."""

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_size_options: Iterable[int] = DEFAULT_PAGE_SIZE_OPTIONS,
        query: Optional[QueryState] = None,
        page_index: int = 0,
    ):
        """
        Initialize pagination state.

        Mod search views pass ``QueryState(sort_field=SortField.FEATURED,
        sort_order="desc")`` to show featured mods first; without it the
        upstream default ordering applies.

        Args:
            page_size: Initial page size, one of ``page_size_options``
            page_size_options: Page sizes offered to the user
            query: Initial search/sort state
            page_index: Initial zero-based page

        Raises:
            ConfigurationError: If ``page_size`` is not an offered option
        """
        self.page_size_options = tuple(page_size_options)
        self._check_page_size(page_size)
        self.query = query or QueryState()
        self.page = PageRequest(page_index=page_index, page_size=page_size)
        self.search_input = self.query.search_filter or ""
        self.total_count: Optional[int] = None
        self.is_fetching = False

    def _check_page_size(self, page_size: int) -> None:
        if page_size not in self.page_size_options:
            raise ConfigurationError(
                f"Page size {page_size} is not one of {list(self.page_size_options)}"
            )

    def _change_query(self, **changes: Any) -> None:
        self.query = self.query.model_copy(update=changes)
        self.page = on_dimension_change(self.page)

    # ==================== DERIVED VALUES ====================

    @property
    def api_index(self) -> int:
        return to_api_index(self.page)

    @property
    def page_index(self) -> int:
        return self.page.page_index

    @property
    def page_size(self) -> int:
        return self.page.page_size

    @property
    def total_pages(self) -> int:
        """Page count from the last known total; 0 until a page has loaded."""
        if self.total_count is None:
            return 0
        return to_total_pages(self.total_count, self.page.page_size)

    @property
    def is_empty(self) -> bool:
        """True once a load reported zero items."""
        return self.total_count == 0

    @property
    def can_go_next(self) -> bool:
        return can_go_next(self.page.page_index, self.total_pages, self.is_fetching)

    @property
    def can_go_previous(self) -> bool:
        return can_go_previous(self.page.page_index, self.is_fetching)

    @property
    def is_search_active(self) -> bool:
        return is_search_active(self.query.search_filter)

    # ==================== SEARCH AND SORT ====================

    def set_search_input(self, text: str) -> None:
        """Update the text box only; nothing is searched until submit."""
        self.search_input = text

    def submit_search(self) -> None:
        """Apply the typed text as the active filter, back on page one."""
        active = self.search_input if is_search_active(self.search_input) else None
        self._change_query(search_filter=active)

    def clear_search(self) -> None:
        self.search_input = ""
        self._change_query(search_filter=None)

    def set_sort_field(self, sort_field: Optional[SortField]) -> None:
        self._change_query(sort_field=SortField(sort_field) if sort_field is not None else None)

    def set_sort_order(self, sort_order: Optional[SortOrder]) -> None:
        if sort_order not in ("asc", "desc", None):
            raise ConfigurationError(f"Invalid sort order {sort_order!r}")
        self._change_query(sort_order=sort_order)

    # ==================== PAGE POSITION ====================

    def set_page_size(self, page_size: int) -> None:
        self._check_page_size(page_size)
        self.page = PageRequest(page_index=0, page_size=page_size)

    def go_to_page(self, page_index: int) -> bool:
        """
        Jump to a page.

        Returns:
            False, leaving the state unchanged, while fetching or when the page
            is outside the known range
        """
        if self.is_fetching or page_index < 0:
            return False
        if self.total_count is not None and page_index > max(self.total_pages - 1, 0):
            return False
        self.page = self.page.model_copy(update={"page_index": page_index})
        return True

    def go_next(self) -> bool:
        if not self.can_go_next:
            return False
        return self.go_to_page(self.page.page_index + 1)

    def go_previous(self) -> bool:
        if not self.can_go_previous:
            return False
        return self.go_to_page(self.page.page_index - 1)

    def apply_pagination(self, pagination: Optional[PaginationMetadata]) -> None:
        """Record the upstream total of the page just loaded."""
        if pagination is None:
            return
        self.total_count = pagination.total_count
        if self.total_pages and self.page.page_index > self.total_pages - 1:
            logger.debug(
                "Page %d is past the last page %d", self.page.page_index, self.total_pages - 1
            )

    # ==================== URL ROUND-TRIP ====================

    def to_url_params(self) -> Dict[str, str]:
        return build_pagination_params(self.page)

    @classmethod
    def from_url_params(
        cls,
        params: Dict[str, Any],
        default_page_size: int = DEFAULT_PAGE_SIZE,
        page_size_options: Iterable[int] = DEFAULT_PAGE_SIZE_OPTIONS,
        query: Optional[QueryState] = None,
    ) -> "PaginationState":
        """Restore the page position carried in the URL (``index``, ``pageSize``)."""
        options = tuple(page_size_options)
        page = parse_pagination_params(
            params, default_page_size=default_page_size, page_size_options=options
        )
        return cls(
            page_size=page.page_size,
            page_size_options=options,
            query=query,
            page_index=page.page_index,
        )
