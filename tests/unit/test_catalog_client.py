"""
Unit tests for CatalogClient.

The HTTP layer is mocked; these tests cover parameter building, gating on the
API key, caching, error results and the featured mods fallback.
"""

from unittest.mock import AsyncMock

import pytest

from modcatalog_client import CatalogClient, CatalogClientConfig
from modcatalog_client.errors import (
    AuthenticationError,
    CatalogClientError,
    ConfigurationError,
    NotFoundError,
)
from modcatalog_client.models.catalog import SortField
from modcatalog_client.models.pagination import PageRequest, PaginationMetadata, QueryState

API_KEY = "test-api-key"


def page_payload(items, index=0, page_size=20, total_count=None):
    return {
        "data": items,
        "pagination": {
            "index": index,
            "pageSize": page_size,
            "resultCount": len(items),
            "totalCount": len(items) if total_count is None else total_count,
        },
    }


class TestCatalogClient:
    """Test cases for CatalogClient."""

    def test_defaults(self):
        catalog_client = CatalogClient()

        assert catalog_client.config.base_url == "https://api.curseforge.com/v1"
        assert catalog_client.cache.stale_time == 300
        assert catalog_client.cache.retry == 1
        assert catalog_client.cache.gc_time == 600
        assert catalog_client.page_defaults == PageRequest(page_index=0, page_size=20)

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, client, mock_http_client):
        async with client:
            pass

        mock_http_client.close.assert_awaited_once()

    # ==================== GATING ====================

    @pytest.mark.asyncio
    async def test_no_api_key_is_idle(self, client, mock_http_client):
        result = await client.list_games("")

        assert result.is_idle
        mock_http_client.get.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("game_id", [None, "", "   "])
    async def test_missing_game_id_is_idle(self, client, mock_http_client, game_id):
        result = await client.get_game(API_KEY, game_id)

        assert result.is_idle
        mock_http_client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_mod_id_is_idle(self, client, mock_http_client):
        assert (await client.get_mod(API_KEY, None)).is_idle
        assert (await client.get_mod_files(API_KEY, "")).is_idle
        assert (await client.get_mod_file(API_KEY, 1, None)).is_idle
        mock_http_client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_without_game_id_raises(self, client, mock_http_client):
        with pytest.raises(ConfigurationError):
            await client.search_mods(API_KEY, None)
        mock_http_client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_without_api_key_is_idle(self, client, mock_http_client):
        result = await client.search_mods("", 432)

        assert result.is_idle
        mock_http_client.get.assert_not_called()

    # ==================== GAMES ====================

    @pytest.mark.asyncio
    async def test_list_games(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload([{"id": 432, "name": "Minecraft"}])

        result = await client.list_games(API_KEY)

        mock_http_client.get.assert_called_once_with(
            "/games", API_KEY, params={"index": 0, "pageSize": 20}
        )
        assert result.is_success
        assert result.data.items[0].name == "Minecraft"

    @pytest.mark.asyncio
    async def test_list_games_third_page(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload(
            [{"id": n} for n in range(5)], index=40, total_count=45
        )
        state = client.create_pagination_state()
        state.go_to_page(2)

        result = await client.list_games(API_KEY, state.page)
        state.apply_pagination(result.data.pagination)

        mock_http_client.get.assert_called_once_with(
            "/games", API_KEY, params={"index": 40, "pageSize": 20}
        )
        assert state.total_pages == 3
        assert state.can_go_next is False
        assert state.can_go_previous is True

    @pytest.mark.asyncio
    async def test_list_games_cached(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload([{"id": 432}])

        await client.list_games(API_KEY)
        await client.list_games(API_KEY)
        await client.list_games(API_KEY, PageRequest(page_index=1, page_size=20))

        assert mock_http_client.get.call_count == 2

    @pytest.mark.asyncio
    async def test_different_credentials_are_not_shared(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload([])

        await client.list_games("key-a")
        await client.list_games("key-b")

        assert mock_http_client.get.call_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"id": 432, "name": "Minecraft"}, {"data": {"id": 432, "name": "Minecraft"}}],
    )
    async def test_get_game_either_shape(self, client, mock_http_client, payload):
        mock_http_client.get.return_value = payload

        result = await client.get_game(API_KEY, 432)

        assert result.data.id == 432
        assert result.data.name == "Minecraft"

    @pytest.mark.asyncio
    async def test_get_game_not_found_is_empty(self, client, mock_http_client):
        mock_http_client.get.side_effect = NotFoundError("HTTP 404: Not Found", 404)

        result = await client.get_game(API_KEY, 999)

        assert result.is_success
        assert result.is_empty
        assert mock_http_client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_get_game_versions(self, client, mock_http_client):
        mock_http_client.get.return_value = {
            "data": [{"type": 1, "versions": ["1.9", "1.10"]}, {"type": 2, "versions": ["1.9"]}]
        }

        result = await client.get_game_versions(API_KEY, 432)

        mock_http_client.get.assert_called_once_with("/games/432/versions", API_KEY)
        assert result.data == ["1.10", "1.9"]

    @pytest.mark.asyncio
    async def test_get_game_version_types(self, client, mock_http_client):
        mock_http_client.get.return_value = {"data": [{"id": 1, "name": "Java"}]}

        result = await client.get_game_version_types(API_KEY, "432")

        assert result.data[0].name == "Java"

    # ==================== MODS ====================

    @pytest.mark.asyncio
    async def test_search_mods_third_page(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload(
            [{"id": n} for n in range(5)], index=40, total_count=45
        )
        state = client.create_pagination_state()
        state.go_to_page(2)

        result = await client.search_mods(API_KEY, 432, state.query, state.page)
        state.apply_pagination(result.data.pagination)

        mock_http_client.get.assert_called_once_with(
            "/mods/search", API_KEY, params={"gameId": 432, "index": 40, "pageSize": 20}
        )
        assert state.total_pages == 3
        assert state.can_go_next is False
        assert state.can_go_previous is True

    @pytest.mark.asyncio
    async def test_new_search_goes_back_to_index_zero(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload([], total_count=500)
        state = client.create_pagination_state(
            QueryState(sort_field=SortField.FEATURED, sort_order="desc")
        )
        state.set_page_size(50)
        state.go_to_page(3)
        state.set_search_input("jei")
        state.submit_search()

        await client.search_mods(API_KEY, 432, state.query, state.page)

        mock_http_client.get.assert_called_once_with(
            "/mods/search",
            API_KEY,
            params={
                "gameId": 432,
                "index": 0,
                "pageSize": 50,
                "searchFilter": "jei",
                "sortField": 1,
                "sortOrder": "desc",
            },
        )

    @pytest.mark.asyncio
    async def test_search_key_includes_page(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload([])

        await client.search_mods(API_KEY, 432, page=PageRequest(page_index=0, page_size=20))
        await client.search_mods(API_KEY, 432, page=PageRequest(page_index=1, page_size=20))

        assert mock_http_client.get.call_count == 2

    @pytest.mark.asyncio
    async def test_search_error_retried_then_reported(self, client, mock_http_client):
        mock_http_client.get.side_effect = CatalogClientError(
            "HTTP 500: Internal Server Error", 500
        )

        result = await client.search_mods(API_KEY, 432)

        assert mock_http_client.get.call_count == 2
        assert result.is_error
        assert result.error_message == "HTTP 500: Internal Server Error"

    @pytest.mark.asyncio
    async def test_bad_api_key_error_message(self, client, mock_http_client):
        mock_http_client.get.side_effect = AuthenticationError("HTTP 403: Forbidden", 403)

        result = await client.list_games("wrong")

        assert result.is_error
        assert isinstance(result.error, AuthenticationError)
        assert result.error_message == "HTTP 403: Forbidden"

    @pytest.mark.asyncio
    async def test_get_mod(self, client, mock_http_client):
        mock_http_client.get.return_value = {"data": {"id": 238222, "name": "JEI"}}

        result = await client.get_mod(API_KEY, 238222)

        mock_http_client.get.assert_called_once_with("/mods/238222", API_KEY)
        assert result.data.name == "JEI"

    @pytest.mark.asyncio
    async def test_featured_mods(self, client, mock_http_client):
        mock_http_client.post.return_value = {
            "data": {"featured": [{"id": 1}], "popular": [{"id": 2}]}
        }

        result = await client.get_featured_mods(API_KEY, 432)

        assert [mod.id for mod in result.data] == [1]

    @pytest.mark.asyncio
    async def test_featured_mods_fall_back_to_popular(self, client, mock_http_client):
        mock_http_client.post.return_value = {
            "data": {"featured": [], "popular": [{"id": 2}, {"id": 3}]}
        }

        result = await client.get_featured_mods(API_KEY, 432)

        assert [mod.id for mod in result.data] == [2, 3]

    @pytest.mark.asyncio
    async def test_featured_mods_disabled(self, client, mock_http_client):
        result = await client.get_featured_mods(API_KEY, 432, enabled=False)

        assert result.is_idle
        mock_http_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_mod_files(self, client, mock_http_client):
        mock_http_client.get.return_value = page_payload([{"id": 10}], page_size=10)

        result = await client.get_mod_files(
            API_KEY, 238222, PageRequest(page_index=1, page_size=10)
        )

        mock_http_client.get.assert_called_once_with(
            "/mods/238222/files", API_KEY, params={"index": 10, "pageSize": 10}
        )
        assert result.data.items[0].id == 10

    @pytest.mark.asyncio
    async def test_get_mod_file(self, client, mock_http_client):
        mock_http_client.get.return_value = {"id": 10, "modId": 238222}

        result = await client.get_mod_file(API_KEY, 238222, 10)

        mock_http_client.get.assert_called_once_with("/mods/238222/files/10", API_KEY)
        assert result.data.id == 10

    @pytest.mark.asyncio
    async def test_get_mod_with_wrongly_typed_field(self, client, mock_http_client):
        mock_http_client.get.return_value = {"id": 1, "logo": "not-an-object"}

        result = await client.get_mod(API_KEY, 1)

        assert result.is_success
        assert result.data.id == 1
        assert result.data.logo is None

    # ==================== OBSERVERS ====================

    @pytest.mark.asyncio
    async def test_observer_receives_result(self, client, mock_http_client):
        mock_http_client.get.return_value = {"id": 432}
        observer = client.create_observer()

        await client.get_game(API_KEY, 432, observer=observer)

        assert observer.state.is_success
        assert observer.state.data.id == 432

    @pytest.mark.asyncio
    async def test_null_total_count_reaches_observer(self, client, mock_http_client):
        mock_http_client.get.return_value = {"data": [], "pagination": {"totalCount": None}}
        observer = client.create_observer()
        state = client.create_pagination_state()

        result = await client.list_games(API_KEY, observer=observer)
        state.apply_pagination(result.data.pagination)

        assert observer.state.is_success
        assert observer.state.data.pagination.total_count is None
        assert state.total_pages == 0
        assert state.is_empty is False

    @pytest.mark.asyncio
    async def test_invalidate_refetches(self, client, mock_http_client):
        mock_http_client.get.return_value = {"id": 432}

        await client.get_game(API_KEY, 432)
        client.invalidate("game")
        await client.get_game(API_KEY, 432)

        assert mock_http_client.get.call_count == 2

    def test_pagination_state_uses_config(self):
        config = CatalogClientConfig(default_page_size=50, page_size_options=[25, 50])

        state = CatalogClient(config).create_pagination_state()

        assert state.page_size == 50
        assert state.page_size_options == (25, 50)

    def test_apply_pagination_metadata(self, client):
        state = client.create_pagination_state()

        state.apply_pagination(PaginationMetadata(totalCount=0))

        assert state.is_empty

    def test_credential_store_from_config(self, tmp_path):
        path = tmp_path / "credentials.json"
        config = CatalogClientConfig(credential_file=str(path))

        store = CatalogClient(config).create_credential_store()
        store.set_api_key("persisted-key")

        assert CatalogClient(config).create_credential_store().api_key == "persisted-key"

    def test_credential_store_in_memory_by_default(self):
        store = CatalogClient().create_credential_store()

        assert store.storage is None
