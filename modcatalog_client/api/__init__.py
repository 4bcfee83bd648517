"""Centralized API layer with typed interfaces.

Provides typed interfaces for all upstream catalog calls, organized by domain.
"""

from ..utils.http_client import HttpClient
from .games_api import GamesApi
from .mods_api import ModsApi


class ApiClient:
    """Centralized API client for the upstream catalog.

    Wraps HttpClient and provides typed interfaces organized by domain.
    """

    def __init__(self, http_client: HttpClient):
        """Initialize API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client
        self.games = GamesApi(http_client)
        self.mods = ModsApi(http_client)


__all__ = ["ApiClient", "GamesApi", "ModsApi"]
