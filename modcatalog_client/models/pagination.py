"""
Pagination types for the ModCatalog client SDK.

The UI counts pages (zero-based page number + page size) while the upstream
counts items (absolute item index + page size). These models carry both sides.
"""

from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

from .catalog import SortField

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


class PageRequest(BaseModel):
    """UI-facing page position.

    Fields:
        page_index: Zero-based page number
        page_size: Number of items per page
    """

    page_index: int = Field(default=0, ge=0, alias="pageIndex", description="Zero-based page")
    page_size: int = Field(default=20, gt=0, alias="pageSize", description="Items per page")

    class Config:
        populate_by_name = True
        frozen = True


class PaginationMetadata(BaseModel):
    """Pagination block returned by the upstream with every list response."""

    index: Optional[int] = Field(
        default=None, description="Absolute index of the first returned item"
    )
    page_size: Optional[int] = Field(
        default=None, alias="pageSize", description="Requested page size"
    )
    result_count: Optional[int] = Field(
        default=None, alias="resultCount", description="Items in this page"
    )
    total_count: Optional[int] = Field(
        default=None, alias="totalCount", description="Items in the full set (None if unknown)"
    )

    class Config:
        populate_by_name = True

    @property
    def totalCount(self) -> Optional[int]:
        """Get total_count as totalCount (camelCase)."""
        return self.total_count

    @property
    def pageSize(self) -> Optional[int]:
        """Get page_size as pageSize (camelCase)."""
        return self.page_size


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Paginated list response structure.

    Fields:
        data: Items for the current page
        pagination: Upstream pagination metadata (absent on some endpoints)
    """

    data: List[T] = Field(default_factory=list, description="Items for the current page")
    pagination: Optional[PaginationMetadata] = Field(
        default=None, description="Pagination metadata"
    )

    @property
    def items(self) -> List[T]:
        """Items for the current page."""
        return self.data


class QueryState(BaseModel):
    """User-controlled filter and sort dimensions of a mod search.

    ``sort_field`` and ``sort_order`` are only sent when set; leaving them as
    None lets the upstream apply its own default ordering.
    """

    search_filter: Optional[str] = Field(default=None, alias="searchFilter")
    sort_field: Optional[SortField] = Field(default=None, alias="sortField")
    sort_order: Optional[SortOrder] = Field(default=None, alias="sortOrder")

    class Config:
        populate_by_name = True
        frozen = True
