"""Mods API implementation.

Provides typed interfaces for mod endpoints:
- Search mods (GET /mods/search)
- Get mod (GET /mods/{modId})
- Get featured mods (POST /mods/featured)
- Get mod files (GET /mods/{modId}/files)
- Get mod file (GET /mods/{modId}/files/{fileId})
"""

from typing import Any, Dict, List, Optional

from ..errors import NotFoundError
from ..models.catalog import FeaturedMods, Mod, ModFile
from ..models.pagination import PaginatedResponse
from ..utils.http_client import HttpClient
from .response_utils import (
    build_model,
    envelope_data,
    parse_entity,
    parse_list,
    parse_paginated_response,
)


class ModsApi:
    """Mods API client for mod endpoints."""

    SEARCH_ENDPOINT = "/mods/search"
    MOD_ENDPOINT = "/mods/{mod_id}"
    FEATURED_ENDPOINT = "/mods/featured"
    FILES_ENDPOINT = "/mods/{mod_id}/files"
    FILE_ENDPOINT = "/mods/{mod_id}/files/{file_id}"

    def __init__(self, http_client: HttpClient):
        """Initialize Mods API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client

    def _build_url(self, template: str, mod_id: Any, file_id: Optional[Any] = None) -> str:
        """Build URL by replacing path parameters."""
        url = template.replace("{mod_id}", str(mod_id))
        if file_id is not None:
            url = url.replace("{file_id}", str(file_id))
        return url

    async def search_mods(self, api_key: str, params: Dict[str, Any]) -> PaginatedResponse[Mod]:
        """Search mods of a game (GET /mods/search).

        Args:
            api_key: Upstream credential
            params: Query parameters built by ``build_search_params``

        Returns:
            Page of mods with pagination metadata

        Raises:
            CatalogClientError: If request fails

        """
        response = await self.http_client.get(self.SEARCH_ENDPOINT, api_key, params=params)
        return parse_paginated_response(response, Mod)

    async def get_mod(self, api_key: str, mod_id: Any) -> Optional[Mod]:
        """Get a single mod (GET /mods/{modId}).

        Returns:
            Mod, or None when the upstream has no such mod

        """
        url = self._build_url(self.MOD_ENDPOINT, mod_id)
        try:
            response = await self.http_client.get(url, api_key)
        except NotFoundError:
            return None
        return parse_entity(response, Mod)

    async def get_featured_mods(self, api_key: str, game_id: int) -> FeaturedMods:
        """Get featured, popular and recently updated mods (POST /mods/featured)."""
        response = await self.http_client.post(
            self.FEATURED_ENDPOINT, api_key, data={"gameId": game_id}
        )
        data = envelope_data(response)
        # Mods are parsed one by one; a malformed mod keeps its valid fields
        lists = {
            name: parse_list(data[name], Mod)
            for name in ("featured", "popular", "recentlyUpdated")
            if name in data
        }
        return build_model(FeaturedMods, {**data, **lists})

    async def get_mod_files(
        self, api_key: str, mod_id: Any, params: Dict[str, Any]
    ) -> PaginatedResponse[ModFile]:
        """List files of a mod (GET /mods/{modId}/files)."""
        url = self._build_url(self.FILES_ENDPOINT, mod_id)
        response = await self.http_client.get(url, api_key, params=params)
        return parse_paginated_response(response, ModFile)

    async def get_mod_file(self, api_key: str, mod_id: Any, file_id: Any) -> Optional[ModFile]:
        """Get one file of a mod (GET /mods/{modId}/files/{fileId})."""
        url = self._build_url(self.FILE_ENDPOINT, mod_id, file_id)
        try:
            response = await self.http_client.get(url, api_key)
        except NotFoundError:
            return None
        return parse_entity(response, ModFile)


def select_featured_mods(featured: FeaturedMods) -> List[Mod]:
    """Featured mods, falling back to popular mods when none are featured."""
    if featured.featured:
        return featured.featured
    return featured.popular or []
