import pytest

from hoopers_api.config.resources import RUN
from hoopers_api.domain.exceptions import ValidationError
from hoopers_api.domain.services.page_walker import PageWalker, WalkState, iterate_items
from tests.fixtures.http import TEST_TOKEN
from tests.fixtures.records import expected_order


@pytest.fixture
def seeded_runs(record_store, forty_five_runs):
    record_store.seed(RUN, forty_five_runs)
    return forty_five_runs


def ids(page) -> list[str]:
    return [run.run_id for run in page.items]


@pytest.mark.integration
class TestCursorPaginationOverHttp:
    @pytest.mark.asyncio
    async def test_three_pages_forward_and_one_back(self, resource_clients, seeded_runs):
        runs = resource_clients.runs

        page1 = await runs.list_page(limit=20, sort_by="Points", token=TEST_TOKEN)
        page2 = await runs.list_page(
            page1.next_cursor, 20, sort_by="Points", token=TEST_TOKEN
        )
        page3 = await runs.list_page(
            page2.next_cursor, 20, sort_by="Points", token=TEST_TOKEN
        )

        assert [page1.count, page2.count, page3.count] == [20, 20, 5]
        assert ids(page1) + ids(page2) + ids(page3) == expected_order(seeded_runs)
        assert page3.has_more is False
        assert page3.next_cursor is None

        back = await runs.list_page(
            page3.previous_cursor, 20, "previous", "Points", token=TEST_TOKEN
        )
        assert ids(back) == ids(page2)

    @pytest.mark.asyncio
    async def test_oversized_limit_is_clamped(self, resource_clients, seeded_runs):
        page = await resource_clients.runs.list_page(limit=1000, token=TEST_TOKEN)
        assert page.count == 45

    @pytest.mark.asyncio
    async def test_empty_collection(self, resource_clients):
        page = await resource_clients.runs.list_page(token=TEST_TOKEN)

        assert page.items == []
        assert page.next_cursor is None
        assert page.previous_cursor is None
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_garbled_cursor_is_rejected(self, resource_clients, seeded_runs):
        with pytest.raises(ValidationError):
            await resource_clients.runs.list_page("not-a-cursor", token=TEST_TOKEN)

    @pytest.mark.asyncio
    async def test_cursor_for_another_sort_field(self, resource_clients, seeded_runs):
        page = await resource_clients.runs.list_page(
            limit=5, sort_by="Points", token=TEST_TOKEN
        )
        with pytest.raises(ValidationError, match="sortBy"):
            await resource_clients.runs.list_page(
                page.next_cursor, 5, sort_by="Name", token=TEST_TOKEN
            )


@pytest.mark.integration
class TestWalkingTheBackend:
    @pytest.mark.asyncio
    async def test_walker_visits_every_run_once(self, resource_clients, seeded_runs):
        walker = PageWalker(resource_clients.runs, TEST_TOKEN, limit=20)
        seen = ids(await walker.first())
        while walker.has_next:
            seen.extend(ids(await walker.next()))

        assert walker.state == WalkState.END
        assert seen == expected_order(seeded_runs)

    @pytest.mark.asyncio
    async def test_iterate_items_by_another_field(self, resource_clients, seeded_runs):
        names = [
            run.name
            async for run in iterate_items(
                resource_clients.runs, TEST_TOKEN, sort_by="Name", limit=8
            )
        ]
        assert names == sorted(run.name for run in seeded_runs)
