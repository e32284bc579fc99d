"""Cursor-based pagination as lazy async iterators.

List endpoints return one page at a time together with an opaque cursor for
the next page. ``paginate`` turns a page-fetching coroutine into an async
iterator over the individual items, fetching pages only as consumption
demands:

    async for group in paginate(fetch_groups_page):
        ...

Errors raised by the fetch function reach the consumer unchanged at the
point of iteration; retries are applied by wrapping the fetch function with
``retrying`` rather than inside the paginator.
"""

from __future__ import annotations

from collections import deque
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass, field
from time import perf_counter
from typing import Generic, TypeVar

from .telemetry import log_page_error, log_page_fetched

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a list endpoint.

    Attributes:
        items: Items in server order (may be empty)
        next_cursor: Cursor for the following page, None on the last page.
            A cursor does not guarantee the next page has items.
    """

    items: list[T] = field(default_factory=list)
    next_cursor: str | None = None

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None


FetchPage = Callable[[str | None], Awaitable[Page[T]]]


class Paginator(Generic[T]):
    """Single-pass async iterator over every item of a paginated listing.

    The first page is requested with ``cursor=None`` on first demand; the next
    page is requested only once the current one is used up and carried a
    cursor. Instances are not restartable and must not be consumed by several
    tasks at once.
    """

    def __init__(self, fetch_page: FetchPage[T]) -> None:
        self._fetch_page = fetch_page
        self._buffer: deque[T] = deque()
        self._cursor: str | None = None
        self._exhausted = False
        self._page_index = 0

    def __aiter__(self) -> Paginator[T]:
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            page = await self._next_page()
            if page is None:
                raise StopAsyncIteration
            self._buffer.extend(page.items)
        return self._buffer.popleft()

    @property
    def pages_fetched(self) -> int:
        return self._page_index

    async def _next_page(self) -> Page[T] | None:
        if self._exhausted:
            return None

        start = perf_counter()
        try:
            page = await self._fetch_page(self._cursor)
        except Exception as e:
            # A failed traversal ends here; later pulls stop cleanly.
            self._exhausted = True
            log_page_error(
                page_index=self._page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_page_fetched(
            page_index=self._page_index,
            items=len(page.items),
            has_next=page.next_cursor is not None,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        self._page_index += 1
        self._cursor = page.next_cursor
        if page.next_cursor is None:
            self._exhausted = True
        return page

    async def pages(self) -> AsyncIterator[Page[T]]:
        """Iterate whole pages instead of items.

        Only meaningful on a fresh paginator; items already buffered by
        item-wise iteration are not replayed.
        """
        if self._buffer:
            raise RuntimeError("Cannot iterate pages after items were consumed")
        while True:
            page = await self._next_page()
            if page is None:
                return
            yield page

    async def take(self, n: int) -> list[T]:
        """Collect at most ``n`` items, fetching no more pages than needed."""
        if n < 0:
            raise ValueError("n must be non-negative")
        items: list[T] = []
        while len(items) < n:
            try:
                items.append(await self.__anext__())
            except StopAsyncIteration:
                break
        return items

    async def collect(self) -> list[T]:
        """Drain the paginator into a list."""
        return [item async for item in self]


def paginate(fetch_page: FetchPage[T]) -> Paginator[T]:
    """Create a lazy item iterator over a cursor-paginated listing.

    Args:
        fetch_page: Coroutine function taking the cursor (None for the first
            page) and returning a ``Page``

    Returns:
        A fresh single-pass ``Paginator``; call again to re-traverse from the
        first page.
    """
    return Paginator(fetch_page)
