import asyncio
from collections.abc import AsyncIterator
from enum import Enum
from typing import Any, Generic

from hoopers_api.adapters.authentication.port import TokenProvider, resolve_token
from hoopers_api.adapters.resource_api.port import D, ResourceClient
from hoopers_api.domain.exceptions import InvalidArgumentError
from hoopers_api.utils.logging import make_logger
from hoopers_api.utils.pagination import CursorPaginatedResult, PageDirection

logger = make_logger(__name__)


class WalkState(str, Enum):
    START = "start"
    ON_PAGE = "on_page"
    END = "end"


class PageWalker(Generic[D]):
    """
    A caller-held paging session over one resource listing.

    The walker starts in `START`. Each fetched page moves it to `ON_PAGE`, or to
    `END` once the page just traversed has no cursor in that direction. From
    any page the walker can still step back the other way while that cursor
    exists. The sort field and limit are fixed for the whole session.
    """

    def __init__(
        self,
        client: ResourceClient[Any, D],
        token: str | TokenProvider,
        sort_by: str | None = None,
        limit: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ):
        self.client = client
        self.token = token
        self.sort_by = sort_by
        self.limit = limit
        self.cancel_event = cancel_event
        self.state = WalkState.START
        self.page: CursorPaginatedResult[D] | None = None

    @property
    def has_next(self) -> bool:
        if self.page is None:
            return self.state == WalkState.START
        return self.page.next_cursor is not None

    @property
    def has_previous(self) -> bool:
        return self.page is not None and self.page.previous_cursor is not None

    async def first(self) -> CursorPaginatedResult[D]:
        return await self._fetch(None, PageDirection.NEXT)

    async def next(self) -> CursorPaginatedResult[D]:
        if self.page is None:
            return await self.first()
        if self.page.next_cursor is None:
            raise InvalidArgumentError("There is no next page")
        return await self._fetch(self.page.next_cursor, PageDirection.NEXT)

    async def previous(self) -> CursorPaginatedResult[D]:
        if self.page is None or self.page.previous_cursor is None:
            raise InvalidArgumentError("There is no previous page")
        return await self._fetch(self.page.previous_cursor, PageDirection.PREVIOUS)

    async def _fetch(
        self, cursor: str | None, direction: PageDirection
    ) -> CursorPaginatedResult[D]:
        token = await resolve_token(self.token)
        page = await self.client.list_page(
            cursor,
            self.limit,
            direction,
            self.sort_by,
            token=token,
            cancel_event=self.cancel_event,
        )
        self.page = page
        self.state = WalkState.ON_PAGE if page.has_more else WalkState.END
        return page


async def iterate_pages(
    client: ResourceClient[Any, D],
    token: str | TokenProvider,
    sort_by: str | None = None,
    limit: int | None = None,
    cancel_event: asyncio.Event | None = None,
) -> AsyncIterator[CursorPaginatedResult[D]]:
    """Yield every page of a listing from the first to the last."""
    walker = PageWalker(client, token, sort_by, limit, cancel_event)
    page = await walker.first()
    yield page
    while walker.has_next:
        page = await walker.next()
        yield page


async def iterate_items(
    client: ResourceClient[Any, D],
    token: str | TokenProvider,
    sort_by: str | None = None,
    limit: int | None = None,
    cancel_event: asyncio.Event | None = None,
) -> AsyncIterator[D]:
    """Yield every record of a listing in sort order, fetching pages lazily."""
    async for page in iterate_pages(client, token, sort_by, limit, cancel_event):
        for item in page.items:
            yield item
