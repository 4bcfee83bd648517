"""Games API implementation.

Provides typed interfaces for game endpoints:
- List games (GET /games)
- Get game (GET /games/{gameId})
- Get game versions (GET /games/{gameId}/versions)
- Get game version types (GET /games/{gameId}/version-types)
"""

from typing import Any, Dict, List, Optional

from ..errors import NotFoundError
from ..models.catalog import Game, GameVersionGroup, GameVersionType
from ..models.pagination import PaginatedResponse
from ..utils.http_client import HttpClient
from .response_utils import parse_entity, parse_list, parse_paginated_response


class GamesApi:
    """Games API client for game endpoints."""

    GAMES_ENDPOINT = "/games"
    GAME_ENDPOINT = "/games/{game_id}"
    VERSIONS_ENDPOINT = "/games/{game_id}/versions"
    VERSION_TYPES_ENDPOINT = "/games/{game_id}/version-types"

    def __init__(self, http_client: HttpClient):
        """Initialize Games API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client

    def _build_url(self, template: str, game_id: Any) -> str:
        """Build URL by replacing the game id path parameter."""
        return template.replace("{game_id}", str(game_id))

    async def list_games(
        self, api_key: str, params: Dict[str, Any]
    ) -> PaginatedResponse[Game]:
        """List games (GET /games).

        Args:
            api_key: Upstream credential
            params: Query parameters (index, pageSize)

        Returns:
            Page of games with pagination metadata

        Raises:
            CatalogClientError: If request fails

        """
        response = await self.http_client.get(self.GAMES_ENDPOINT, api_key, params=params)
        return parse_paginated_response(response, Game)

    async def get_game(self, api_key: str, game_id: Any) -> Optional[Game]:
        """Get a single game (GET /games/{gameId}).

        The endpoint may answer with the bare game or with ``{"data": game}``.

        Returns:
            Game, or None when the upstream has no such game

        """
        url = self._build_url(self.GAME_ENDPOINT, game_id)
        try:
            response = await self.http_client.get(url, api_key)
        except NotFoundError:
            return None
        return parse_entity(response, Game)

    async def get_game_version_groups(
        self, api_key: str, game_id: Any
    ) -> List[GameVersionGroup]:
        """Get versions grouped by version type (GET /games/{gameId}/versions)."""
        url = self._build_url(self.VERSIONS_ENDPOINT, game_id)
        response = await self.http_client.get(url, api_key)
        return parse_list(response, GameVersionGroup)

    async def get_game_version_types(self, api_key: str, game_id: Any) -> List[GameVersionType]:
        """Get version types (GET /games/{gameId}/version-types)."""
        url = self._build_url(self.VERSION_TYPES_ENDPOINT, game_id)
        response = await self.http_client.get(url, api_key)
        return parse_list(response, GameVersionType)


def flatten_game_versions(groups: List[GameVersionGroup]) -> List[str]:
    """
    Merge the versions of all version types into one list.

    Duplicates are removed and the result is sorted as plain strings, so
    "1.10" sorts before "1.9". Callers needing version order must re-sort.
    """
    versions = {version for group in groups for version in (group.versions or [])}
    return sorted(versions)
