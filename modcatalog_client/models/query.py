"""
Query result type returned by the catalog façade.

A view renders exactly one of four states from a QueryResult: idle (nothing
dispatched yet, e.g. no API key), loading, error, or success. A successful
result may still be empty, which is an empty/not-found state and not a failure.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from .pagination import PaginatedResponse

QueryStatus = Literal["idle", "loading", "error", "success"]


class QueryResult(BaseModel):
    """Outcome of one keyed catalog query."""

    status: QueryStatus = Field(default="idle", description="Query lifecycle state")
    data: Optional[Any] = Field(default=None, description="Result data on success")
    error: Optional[Exception] = Field(default=None, description="Original error on failure")
    key: Optional[Any] = Field(default=None, description="Cache key the result belongs to")

    class Config:
        arbitrary_types_allowed = True

    @classmethod
    def idle(cls, key: Any = None) -> "QueryResult":
        return cls(status="idle", key=key)

    @classmethod
    def loading(cls, key: Any = None) -> "QueryResult":
        return cls(status="loading", key=key)

    @classmethod
    def success(cls, data: Any, key: Any = None) -> "QueryResult":
        return cls(status="success", data=data, key=key)

    @classmethod
    def failure(cls, error: Exception, key: Any = None) -> "QueryResult":
        return cls(status="error", error=error, key=key)

    @property
    def is_idle(self) -> bool:
        return self.status == "idle"

    @property
    def is_loading(self) -> bool:
        return self.status == "loading"

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_empty(self) -> bool:
        """True for a successful result with no entity or no items."""
        if not self.is_success:
            return False
        if self.data is None:
            return True
        if isinstance(self.data, PaginatedResponse):
            return not self.data.data
        if isinstance(self.data, list):
            return not self.data
        return False

    @property
    def error_message(self) -> Optional[str]:
        """Message of the stored error, unchanged."""
        if self.error is None:
            return None
        return getattr(self.error, "message", None) or str(self.error)

    def unwrap(self) -> Any:
        """Return the data, raising the stored error for failed results."""
        if self.error is not None:
            raise self.error
        return self.data
