"""
Configuration types for the ModCatalog client SDK.

This module contains the Pydantic model that defines the client configuration:
upstream location, cache policy and pagination defaults.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

DEFAULT_BASE_URL = "https://api.curseforge.com/v1"


class CatalogClientConfig(BaseModel):
    """Main ModCatalog client configuration.

    All fields are optional:
    - base_url: Upstream REST base path
    - log_level: Logging level (debug, info, warn, error)
    - stale_time / retry / retry_delay / gc_time: Query cache policy
    - default_page_index / default_page_size / page_size_options: Pagination defaults
    - credential_file: Where the API key is persisted (None keeps it in memory only)
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Upstream REST base URL")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    log_level: Literal["debug", "info", "warn", "error"] = Field(
        default="info",
        description="Log level",
    )
    stale_time: int = Field(
        default=300, ge=0, description="Seconds a cached result is served without refetching"
    )
    retry: int = Field(
        default=1, ge=0, le=1, description="Automatic retries after a failed request"
    )
    retry_delay: float = Field(default=1.0, ge=0, description="Seconds to wait before retrying")
    gc_time: int = Field(
        default=600, ge=0, description="Seconds after which a cached result is dropped from memory"
    )
    default_page_index: int = Field(default=0, ge=0, description="Default zero-based page")
    default_page_size: int = Field(default=20, gt=0, description="Default page size")
    page_size_options: List[int] = Field(
        default_factory=lambda: [10, 20, 50],
        min_length=1,
        description="Page sizes offered to the user",
    )
    credential_file: Optional[str] = Field(
        default=None, description="JSON file holding the persisted API key"
    )

    @model_validator(mode="after")
    def _check_page_size(self) -> "CatalogClientConfig":
        if self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size {self.default_page_size} is not one of "
                f"{self.page_size_options}"
            )
        return self
