"""
CatalogClient - Main SDK class for browsing the mod catalog.

This module contains the CatalogClient class which puts the typed endpoint
wrappers behind one façade. Every operation builds its upstream parameters,
derives a cache key from (credential, entity kind, entity id, query state,
page position) and resolves it through the shared QueryCache.
"""

import logging
from typing import Any, Hashable, List, Optional

from .api import ApiClient
from .api.games_api import flatten_game_versions
from .api.mods_api import select_featured_mods
from .errors import CatalogClientError, ConfigurationError
from .models.config import CatalogClientConfig
from .models.pagination import PageRequest, QueryState
from .models.query import QueryResult
from .services.credential_store import CredentialStore
from .services.pagination_state import PaginationState
from .services.query_cache import Fetcher, QueryCache, QueryObserver, build_cache_key
from .utils.http_client import HttpClient
from .utils.query_params import build_page_params, build_search_params, require_positive_id

logger = logging.getLogger(__name__)


def _entity_id(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class CatalogClient:
    """
    Main catalog SDK class.

    The API key is passed to every operation instead of being held by the
    client, so one client (and one cache) can serve any credential. An empty
    API key, or an empty entity id, dispatches nothing and yields an idle
    result. Configuration errors (e.g. a missing game id for a mod search) are
    raised immediately; transport and upstream errors are retried once and then
    returned in an error result with their message unchanged.
    """

    def __init__(self, config: Optional[CatalogClientConfig] = None):
        """Initialize CatalogClient with configuration."""
        self.config = config or CatalogClientConfig()
        self.http_client = HttpClient(self.config)
        self.api_client = ApiClient(self.http_client)
        self.cache = QueryCache(
            stale_time=self.config.stale_time,
            retry=self.config.retry,
            retry_delay=self.config.retry_delay,
            gc_time=self.config.gc_time,
        )
        self.page_defaults = PageRequest(
            page_index=self.config.default_page_index,
            page_size=self.config.default_page_size,
        )

    # ==================== LIFECYCLE METHODS ====================

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.close()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def create_observer(self) -> QueryObserver:
        """Observer for one view; keeps only the latest requested result."""
        return QueryObserver(self.cache)

    def create_pagination_state(self, query: Optional[QueryState] = None) -> PaginationState:
        """Pagination state using the configured page size defaults."""
        return PaginationState(
            page_size=self.config.default_page_size,
            page_size_options=self.config.page_size_options,
            query=query,
        )

    def create_credential_store(self) -> CredentialStore:
        """Credential store persisted to ``config.credential_file`` (memory-only when unset)."""
        return CredentialStore.from_file(self.config.credential_file)

    def invalidate(self, kind: Optional[str] = None) -> None:
        """Forget cached results so the next request refetches."""
        self.cache.invalidate(kind)

    async def _query(
        self,
        key: Hashable,
        fetcher: Fetcher,
        enabled: bool,
        observer: Optional[QueryObserver],
    ) -> QueryResult:
        if observer is not None:
            return await observer.observe(key, fetcher, enabled=enabled)
        if not enabled:
            logger.debug("Query %r not dispatched", key)
            return QueryResult.idle(key)
        try:
            data = await self.cache.fetch(key, fetcher)
        except ConfigurationError:
            raise
        except CatalogClientError as error:
            return QueryResult.failure(error, key)
        return QueryResult.success(data, key)

    # ==================== GAMES ====================

    async def list_games(
        self,
        api_key: str,
        page: Optional[PageRequest] = None,
        observer: Optional[QueryObserver] = None,
    ) -> QueryResult:
        """List games; data is a PaginatedResponse[Game]."""
        page = page or self.page_defaults
        params = build_page_params(page)
        key = build_cache_key(api_key, "games", page=page)

        async def fetch():
            return await self.api_client.games.list_games(api_key, params)

        return await self._query(key, fetch, bool(api_key), observer)

    async def get_game(
        self, api_key: str, game_id: Any, observer: Optional[QueryObserver] = None
    ) -> QueryResult:
        """Get one game; data is a Game, or None when the game does not exist."""
        entity_id = _entity_id(game_id)
        key = build_cache_key(api_key, "game", entity_id)

        async def fetch():
            return await self.api_client.games.get_game(api_key, entity_id)

        return await self._query(key, fetch, bool(api_key and entity_id), observer)

    async def get_game_versions(
        self, api_key: str, game_id: Any, observer: Optional[QueryObserver] = None
    ) -> QueryResult:
        """Get all version strings of a game, deduplicated and string-sorted."""
        scoped_id = require_positive_id("gameId", game_id)
        key = build_cache_key(api_key, "game.versions", scoped_id)

        async def fetch() -> List[str]:
            groups = await self.api_client.games.get_game_version_groups(api_key, scoped_id)
            return flatten_game_versions(groups)

        return await self._query(key, fetch, bool(api_key), observer)

    async def get_game_version_types(
        self, api_key: str, game_id: Any, observer: Optional[QueryObserver] = None
    ) -> QueryResult:
        """Get the version types of a game."""
        scoped_id = require_positive_id("gameId", game_id)
        key = build_cache_key(api_key, "game.versionTypes", scoped_id)

        async def fetch():
            return await self.api_client.games.get_game_version_types(api_key, scoped_id)

        return await self._query(key, fetch, bool(api_key), observer)

    # ==================== MODS ====================

    async def search_mods(
        self,
        api_key: str,
        game_id: Any,
        state: Optional[QueryState] = None,
        page: Optional[PageRequest] = None,
        observer: Optional[QueryObserver] = None,
    ) -> QueryResult:
        """
        Search the mods of a game; data is a PaginatedResponse[Mod].

        Raises:
            ConfigurationError: If ``game_id`` is missing or not a positive integer
        """
        page = page or self.page_defaults
        params = build_search_params(game_id, state, page)
        key = build_cache_key(api_key, "mods.search", params["gameId"], state, page)

        async def fetch():
            return await self.api_client.mods.search_mods(api_key, params)

        return await self._query(key, fetch, bool(api_key), observer)

    async def get_mod(
        self, api_key: str, mod_id: Any, observer: Optional[QueryObserver] = None
    ) -> QueryResult:
        """Get one mod; data is a Mod, or None when the mod does not exist."""
        entity_id = _entity_id(mod_id)
        key = build_cache_key(api_key, "mod", entity_id)

        async def fetch():
            return await self.api_client.mods.get_mod(api_key, entity_id)

        return await self._query(key, fetch, bool(api_key and entity_id), observer)

    async def get_featured_mods(
        self,
        api_key: str,
        game_id: Any,
        observer: Optional[QueryObserver] = None,
        enabled: bool = True,
    ) -> QueryResult:
        """
        Get featured mods of a game, falling back to popular mods.

        Raises:
            ConfigurationError: If ``game_id`` is missing or not a positive integer
        """
        scoped_id = require_positive_id("gameId", game_id)
        key = build_cache_key(api_key, "mods.featured", scoped_id)

        async def fetch():
            featured = await self.api_client.mods.get_featured_mods(api_key, scoped_id)
            return select_featured_mods(featured)

        return await self._query(key, fetch, enabled and bool(api_key), observer)

    async def get_mod_files(
        self,
        api_key: str,
        mod_id: Any,
        page: Optional[PageRequest] = None,
        observer: Optional[QueryObserver] = None,
    ) -> QueryResult:
        """List the files of a mod; data is a PaginatedResponse[ModFile]."""
        entity_id = _entity_id(mod_id)
        page = page or self.page_defaults
        params = build_page_params(page)
        key = build_cache_key(api_key, "mod.files", entity_id, page=page)

        async def fetch():
            return await self.api_client.mods.get_mod_files(api_key, entity_id, params)

        return await self._query(key, fetch, bool(api_key and entity_id), observer)

    async def get_mod_file(
        self,
        api_key: str,
        mod_id: Any,
        file_id: Any,
        observer: Optional[QueryObserver] = None,
    ) -> QueryResult:
        """Get one file of a mod; data is a ModFile or None."""
        entity_id = _entity_id(mod_id)
        file_entity_id = _entity_id(file_id)
        key = build_cache_key(api_key, "mod.file", (entity_id, file_entity_id))

        async def fetch():
            return await self.api_client.mods.get_mod_file(api_key, entity_id, file_entity_id)

        enabled = bool(api_key and entity_id and file_entity_id)
        return await self._query(key, fetch, enabled, observer)
