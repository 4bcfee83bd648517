"""
Keyed query cache with in-flight deduplication.

Each logical request is identified by a CacheKey. For one key there is at most
one network call in flight; concurrent callers attach to it. Successful results
are served from memory until they are older than the staleness window, and
are dropped from memory once older than ``gc_time``. Every request is retried
at most ``retry`` times (0 or 1) on transport or upstream errors;
configuration errors are never retried.
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Hashable, NamedTuple, Optional

from ..errors import CatalogClientError, ConfigurationError
from ..models.pagination import PageRequest, QueryState
from ..models.query import QueryResult
from ..utils.data_masker import DataMasker
from ..utils.pagination import to_api_index

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Any]]


class CacheKey(NamedTuple):
    """Identity of one logical catalog request."""

    credential: str
    kind: str
    entity_id: Optional[Hashable] = None
    search_filter: Optional[str] = None
    sort_field: Optional[int] = None
    sort_order: Optional[str] = None
    index: Optional[int] = None
    page_size: Optional[int] = None

    def __repr__(self) -> str:
        masked = self._replace(credential=DataMasker.mask_value(self.credential, show_last=4))
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self._fields, masked))
        return f"CacheKey({fields})"


def build_cache_key(
    credential: str,
    kind: str,
    entity_id: Optional[Hashable] = None,
    state: Optional[QueryState] = None,
    page: Optional[PageRequest] = None,
) -> CacheKey:
    """
    Build the key for a request from everything that affects its result.

    Args:
        credential: API key the request is made with
        kind: Entity kind, e.g. "games" or "mods.search"
        entity_id: Game or mod id the request is scoped to
        state: Search/sort state
        page: Page position

    Returns:
        CacheKey
    """
    return CacheKey(
        credential=credential,
        kind=kind,
        entity_id=entity_id,
        search_filter=state.search_filter if state else None,
        sort_field=int(state.sort_field) if state and state.sort_field is not None else None,
        sort_order=state.sort_order if state else None,
        index=to_api_index(page) if page else None,
        page_size=page.page_size if page else None,
    )


class CacheEntry(NamedTuple):
    data: Any
    updated_at: float


def _matches_kind(key: Hashable, kind: Optional[str]) -> bool:
    return kind is None or getattr(key, "kind", None) == kind


class QueryCache:
    """In-memory query cache with in-flight deduplication and bounded retry."""

    def __init__(
        self,
        stale_time: float = 300,
        retry: int = 1,
        retry_delay: float = 1.0,
        gc_time: float = 600,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize query cache.

        Args:
            stale_time: Seconds a successful result is served without refetching
            retry: Retries after a failed attempt (clamped to 0..1)
            retry_delay: Seconds to wait before retrying
            gc_time: Seconds after which a result is dropped from memory
                (never less than ``stale_time``)
            clock: Monotonic time source
        """
        self.stale_time = stale_time
        self.retry = max(0, min(retry, 1))
        self.retry_delay = retry_delay
        self.gc_time = max(gc_time, stale_time)
        self._clock = clock
        self._entries: Dict[Hashable, CacheEntry] = {}
        self._in_flight: Dict[Hashable, "asyncio.Future[Any]"] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def is_stale(self, key: Hashable) -> bool:
        """True when the key has no result or its result is past the window."""
        entry = self._entries.get(key)
        if entry is None:
            return True
        return self._clock() - entry.updated_at >= self.stale_time

    def is_fetching(self, key: Hashable) -> bool:
        return key in self._in_flight

    def get_cached(self, key: Hashable) -> Optional[Any]:
        """Last successful result for the key, fresh or stale."""
        entry = self._entries.get(key)
        return entry.data if entry else None

    def invalidate(self, kind: Optional[str] = None) -> None:
        """
        Drop cached results, all of them or those of one kind.

        Calls in flight for the dropped keys are detached: their waiters still
        get the result, but it is not cached and the next fetch starts anew.
        """
        for key in [k for k in self._entries if _matches_kind(k, kind)]:
            del self._entries[key]
        for key in [k for k in self._in_flight if _matches_kind(k, kind)]:
            logger.debug("Detaching in-flight query %r", key)
            del self._in_flight[key]

    def clear(self) -> None:
        self.invalidate()

    def prune(self) -> int:
        """Drop results older than ``gc_time``; returns how many were dropped."""
        now = self._clock()
        expired = [k for k, e in self._entries.items() if now - e.updated_at >= self.gc_time]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Pruned %d expired queries", len(expired))
        return len(expired)

    def _store(self, key: Hashable, data: Any) -> None:
        self.prune()
        self._entries[key] = CacheEntry(data, self._clock())

    async def fetch(self, key: Hashable, fetcher: Fetcher) -> Any:
        """
        Resolve a key, using the cache or a shared in-flight call.

        Cancelling the awaiting caller does not abort the shared call; its
        result still lands in the cache.

        Args:
            key: Request identity
            fetcher: Coroutine function performing the request

        Returns:
            Result data

        Raises:
            CatalogClientError: If the request still fails after the retry
        """
        if not self.is_stale(key):
            logger.debug("Query cache hit for %r", key)
            return self._entries[key].data

        in_flight = self._in_flight.get(key)
        if in_flight is None:
            in_flight = asyncio.ensure_future(self._fetch_with_retry(key, fetcher))
            in_flight.add_done_callback(_consume_exception)
            self._in_flight[key] = in_flight
        else:
            logger.debug("Attaching to in-flight query %r", key)
        return await asyncio.shield(in_flight)

    async def _fetch_with_retry(self, key: Hashable, fetcher: Fetcher) -> Any:
        task = asyncio.current_task()
        try:
            attempt = 0
            while True:
                try:
                    data = await fetcher()
                except ConfigurationError:
                    raise
                except CatalogClientError as error:
                    if attempt >= self.retry:
                        raise
                    attempt += 1
                    logger.warning(
                        "Query %r failed, retrying (%d/%d): %s",
                        key,
                        attempt,
                        self.retry,
                        error.message,
                    )
                    await asyncio.sleep(self.retry_delay)
                    continue
                if self._in_flight.get(key) is task:
                    self._store(key, data)
                else:
                    logger.debug("Not caching result of invalidated query %r", key)
                return data
        finally:
            if self._in_flight.get(key) is task:
                del self._in_flight[key]
def _consume_exception(future: "asyncio.Future[Any]") -> None:
    # Mark the error as retrieved when every waiter has gone away
    if not future.cancelled():
        future.exception()


class QueryObserver:
    """
    One consumer's subscription to the latest query it asked for.

    A view keeps one observer per list or detail panel. Only the result of the
    most recently observed key is applied to ``state``; a slower response for
    an older key is returned to its caller but never overwrites newer state.
    """

    def __init__(self, cache: QueryCache):
        self.cache = cache
        self.state: QueryResult = QueryResult.idle()
        self._current_key: Optional[Hashable] = None
        self._listeners: list = []

    @property
    def current_key(self) -> Optional[Hashable]:
        return self._current_key

    def subscribe(self, listener: Callable[[QueryResult], None]) -> Callable[[], None]:
        """Register a callback receiving every applied state."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _apply(self, result: QueryResult) -> None:
        self.state = result
        for listener in list(self._listeners):
            listener(result)

    def reset(self) -> None:
        """Abandon interest in any pending result (e.g. the view was closed)."""
        self._current_key = None
        self._apply(QueryResult.idle())

    async def observe(
        self, key: Hashable, fetcher: Fetcher, enabled: bool = True
    ) -> QueryResult:
        """
        Make ``key`` the observed query and resolve it.

        Args:
            key: Request identity
            fetcher: Coroutine function performing the request
            enabled: When False nothing is dispatched and the state is idle

        Returns:
            Result for ``key``; applied to ``state`` only if ``key`` is still
            the observed key when it resolves
        """
        if not enabled:
            self._current_key = None
            self._apply(QueryResult.idle(key))
            return self.state

        self._current_key = key
        self._apply(QueryResult.loading(key))
        try:
            data = await self.cache.fetch(key, fetcher)
            result = QueryResult.success(data, key)
        except ConfigurationError as error:
            self._settle(key, QueryResult.failure(error, key))
            raise
        except CatalogClientError as error:
            result = QueryResult.failure(error, key)
        except Exception as error:
            # Unexpected errors still leave the loading state before propagating
            self._settle(key, QueryResult.failure(error, key))
            raise

        self._settle(key, result)
        return result

    def _settle(self, key: Hashable, result: QueryResult) -> None:
        if self._current_key != key:
            logger.debug("Discarding superseded result for %r", key)
            return
        self._apply(result)
