import pytest

from hoopers_api.adapters.authentication.adapter_static_token import (
    StaticTokenProvider,
)
from hoopers_api.adapters.authentication.port import TokenProvider
from hoopers_api.config.resources import RUN
from hoopers_api.domain.exceptions import InvalidArgumentError, UnauthorizedError
from hoopers_api.domain.services.keyset_paginator import KeysetPaginator
from hoopers_api.domain.services.page_walker import (
    PageWalker,
    WalkState,
    iterate_items,
    iterate_pages,
)
from tests.fixtures.records import expected_order


class PaginatorBackedClient:
    """Serves `list_page` straight from a keyset paginator, recording each token used."""

    def __init__(self, records):
        self.records = records
        self.paginator = KeysetPaginator(RUN)
        self.tokens: list[str] = []

    async def list_page(
        self,
        cursor=None,
        limit=None,
        direction="next",
        sort_by=None,
        *,
        token,
        cancel_event=None,
        timeout=None,
    ):
        self.tokens.append(token)
        return self.paginator.paginate(
            self.records, cursor, limit or 20, direction, sort_by
        )


class RotatingTokenProvider(TokenProvider):
    def __init__(self):
        self.issued = 0

    async def get_token(self) -> str:
        self.issued += 1
        return f"token-{self.issued}"


@pytest.fixture
def client(forty_five_runs):
    return PaginatorBackedClient(forty_five_runs)


@pytest.mark.unit
class TestPageWalker:
    @pytest.mark.asyncio
    async def test_walks_forward_to_the_end(self, client, forty_five_runs):
        walker = PageWalker(client, "token", limit=20)
        assert walker.state == WalkState.START
        assert walker.has_next is True
        assert walker.has_previous is False

        page1 = await walker.first()
        assert walker.state == WalkState.ON_PAGE
        page2 = await walker.next()
        page3 = await walker.next()

        assert [page1.count, page2.count, page3.count] == [20, 20, 5]
        assert walker.state == WalkState.END
        assert walker.has_next is False
        assert walker.has_previous is True
        with pytest.raises(InvalidArgumentError):
            await walker.next()

    @pytest.mark.asyncio
    async def test_walks_back(self, client):
        walker = PageWalker(client, "token", limit=20)
        page1 = await walker.first()
        await walker.next()

        back = await walker.previous()

        assert [run.run_id for run in back.items] == [
            run.run_id for run in page1.items
        ]
        assert walker.state == WalkState.END
        with pytest.raises(InvalidArgumentError):
            await walker.previous()

    @pytest.mark.asyncio
    async def test_previous_before_first_page(self, client):
        with pytest.raises(InvalidArgumentError):
            await PageWalker(client, "token").previous()
        assert client.tokens == []

    @pytest.mark.asyncio
    async def test_next_from_start_fetches_the_first_page(self, client):
        walker = PageWalker(client, "token", limit=10)
        page = await walker.next()
        assert page.previous_cursor is None
        assert page.count == 10

    @pytest.mark.asyncio
    async def test_token_provider_is_asked_before_every_request(self, client):
        provider = RotatingTokenProvider()
        walker = PageWalker(client, provider, limit=20)

        await walker.first()
        await walker.next()

        assert client.tokens == ["token-1", "token-2"]

    @pytest.mark.asyncio
    async def test_empty_static_token(self, client):
        with pytest.raises(UnauthorizedError):
            await PageWalker(client, StaticTokenProvider("")).first()


@pytest.mark.unit
class TestIterators:
    @pytest.mark.asyncio
    async def test_iterate_pages(self, client):
        counts = [page.count async for page in iterate_pages(client, "token", limit=20)]
        assert counts == [20, 20, 5]

    @pytest.mark.asyncio
    async def test_iterate_items_in_sort_order(self, client, forty_five_runs):
        run_ids = [
            run.run_id
            async for run in iterate_items(
                client, StaticTokenProvider("token"), limit=7
            )
        ]
        assert run_ids == expected_order(forty_five_runs)

    @pytest.mark.asyncio
    async def test_iterate_empty_collection(self):
        pages = [
            page async for page in iterate_pages(PaginatorBackedClient([]), "token")
        ]
        assert len(pages) == 1
        assert pages[0].items == []
