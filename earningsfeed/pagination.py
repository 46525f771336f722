"""Cursor pagination over list endpoints.

A Paginator turns a ``list``-style coroutine into one lazy stream of items.
Pages are fetched strictly one at a time, and only once the consumer has
pulled every item of the previous page, so stopping early never costs an
extra request.
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import aclosing
from typing import Generic, TypeVar

from earningsfeed.models import PaginatedResponse
from earningsfeed.params import QueryParams

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound=QueryParams)

FetchPage = Callable[[P], Awaitable[PaginatedResponse[T]]]


class Paginator(Generic[T, P]):
    """
    Lazy async iterator over every item of a paginated endpoint.

    Iteration stops when a page reports ``has_more=False`` (any cursor on it
    is ignored) or when ``has_more=True`` arrives without a cursor. Errors
    from a page request propagate out of the ``async for`` and end it.

    A Paginator can be iterated more than once; each pass starts again from
    the original parameters.

    Example:
        async for filing in client.filings.iter(ListFilingsParams(ticker="AAPL")):
            print(filing.title)
    """

    def __init__(self, fetch_page: FetchPage, params: P) -> None:
        """
        Args:
            fetch_page: Coroutine function returning one page for the given params
            params: Starting parameters; the cursor is advanced on copies
        """
        self._fetch_page = fetch_page
        self._params = params
        self.last_cursor: str | None = params.cursor
        self.pages_fetched = 0

    @property
    def params(self) -> P:
        return self._params

    async def pages(self) -> AsyncIterator[PaginatedResponse[T]]:
        """Yield whole pages, following cursors until exhausted."""
        params = self._params
        while True:
            page = await self._fetch_page(params)
            self.pages_fetched += 1
            yield page

            if not page.has_more:
                return
            if page.next_cursor is None:
                logger.debug(
                    "Page %d reported has_more without a cursor; stopping",
                    self.pages_fetched,
                )
                return

            self.last_cursor = page.next_cursor
            params = params.with_cursor(page.next_cursor)

    async def __aiter__(self) -> AsyncIterator[T]:
        async with aclosing(self.pages()) as pages:
            async for page in pages:
                for item in page.items:
                    yield item

    async def collect(self, limit: int | None = None) -> list[T]:
        """
        Gather items into a list.

        Args:
            limit: Stop after this many items (None for all)

        Returns:
            Items in server order
        """
        items: list[T] = []
        if limit is not None and limit <= 0:
            return items

        async with aclosing(self.__aiter__()) as stream:
            async for item in stream:
                items.append(item)
                if limit is not None and len(items) >= limit:
                    break
        return items
