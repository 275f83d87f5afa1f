import json
import logging

import pytest

from hoopers_api.adapters.resource_api.port import DeleteResult
from hoopers_api.domain.entities.runs import RunDetailEntity, RunEntity
from hoopers_api.domain.exceptions import (
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
    ValidationError,
)
from hoopers_api.domain.repositories.run_repository import RunRepository
from hoopers_api.utils.pagination import PageDirection, encode_cursor
from tests.fixtures.http import TEST_TOKEN

PAGE_BODY = {
    "items": [{"RunId": "r1", "Name": "Friday Run", "Points": 9}],
    "nextCursor": "next-cursor",
    "previousCursor": None,
    "direction": "next",
    "sortBy": "Points",
}


@pytest.fixture
def run_client(gateway, environment_variables):
    return RunRepository(gateway, environment_variables)


@pytest.mark.unit
class TestListPageArguments:
    """Argument errors must surface before anything is sent."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cursor", [None, ""])
    async def test_previous_without_cursor_sends_nothing(
        self, run_client, recording_handler, cursor
    ):
        with pytest.raises(InvalidArgumentError):
            await run_client.list_page(
                cursor=cursor, direction="previous", token=TEST_TOKEN
            )
        assert recording_handler.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -5])
    async def test_non_positive_limit(self, run_client, recording_handler, limit):
        with pytest.raises(InvalidArgumentError):
            await run_client.list_page(limit=limit, token=TEST_TOKEN)
        assert recording_handler.requests == []

    @pytest.mark.asyncio
    async def test_unknown_direction(self, run_client, recording_handler):
        with pytest.raises(InvalidArgumentError):
            await run_client.list_page(direction="sideways", token=TEST_TOKEN)
        assert recording_handler.requests == []

    @pytest.mark.asyncio
    async def test_unknown_sort_field(self, run_client, recording_handler):
        with pytest.raises(InvalidArgumentError, match="Points"):
            await run_client.list_page(sort_by="Height", token=TEST_TOKEN)
        assert recording_handler.requests == []

    @pytest.mark.asyncio
    async def test_first_page_query(self, run_client, recording_handler):
        recording_handler.respond_with(200, json=PAGE_BODY)

        await run_client.list_page(token=TEST_TOKEN)

        request = recording_handler.last_request
        assert request.url.path == "/api/Run/GetRunsWithCursor"
        assert "cursor" not in request.url.params
        assert request.url.params["limit"] == "20"
        assert request.url.params["direction"] == "next"
        assert request.url.params["sortBy"] == "Points"

    @pytest.mark.asyncio
    async def test_sort_field_and_direction_are_canonicalized(
        self, run_client, recording_handler
    ):
        recording_handler.respond_with(200, json={**PAGE_BODY, "direction": "previous"})
        cursor = encode_cursor("RunDate", None, "r1")

        await run_client.list_page(
            cursor=cursor, direction="PREVIOUS", sort_by="rundate", token=TEST_TOKEN
        )

        params = recording_handler.last_request.url.params
        assert params["sortBy"] == "RunDate"
        assert params["direction"] == "previous"
        assert params["cursor"] == cursor

    @pytest.mark.asyncio
    async def test_oversized_limit_is_clamped(
        self, run_client, recording_handler, caplog
    ):
        recording_handler.respond_with(200, json=PAGE_BODY)

        with caplog.at_level(logging.WARNING):
            await run_client.list_page(limit=500, token=TEST_TOKEN)

        assert recording_handler.last_request.url.params["limit"] == "100"
        assert "clamping" in caplog.text


@pytest.mark.unit
class TestListPageResponse:
    @pytest.mark.asyncio
    async def test_decodes_detail_records(self, run_client, recording_handler):
        recording_handler.respond_with(200, json=PAGE_BODY)

        page = await run_client.list_page(token=TEST_TOKEN)

        assert isinstance(page.items[0], RunDetailEntity)
        assert page.items[0].name == "Friday Run"
        assert page.next_cursor == "next-cursor"
        assert page.has_more is True

    @pytest.mark.asyncio
    async def test_has_more_uses_requested_direction_when_not_echoed(
        self, run_client, recording_handler
    ):
        recording_handler.respond_with(
            200, json={"items": [], "nextCursor": "n", "previousCursor": None}
        )

        page = await run_client.list_page(
            cursor="c", direction=PageDirection.PREVIOUS, token=TEST_TOKEN
        )

        assert page.direction == PageDirection.PREVIOUS
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_undecodable_success_body(self, run_client, recording_handler):
        recording_handler.respond_with(200, content=b"<html></html>")
        with pytest.raises(UpstreamError):
            await run_client.list_page(token=TEST_TOKEN)

    @pytest.mark.asyncio
    async def test_backend_rejection_is_a_validation_error(
        self, run_client, recording_handler
    ):
        recording_handler.respond_with(400, json={"message": "Invalid cursor format"})
        with pytest.raises(ValidationError, match="Invalid cursor format"):
            await run_client.list_page(cursor="stale", token=TEST_TOKEN)


@pytest.mark.unit
class TestReads:
    @pytest.mark.asyncio
    async def test_list_all(self, run_client, recording_handler):
        recording_handler.respond_with(200, json=[{"runId": "r1"}, {"RUNID": "r2"}])

        runs = await run_client.list_all(token=TEST_TOKEN)

        assert recording_handler.last_request.url.path == "/api/Run/GetRuns"
        assert [run.run_id for run in runs] == ["r1", "r2"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, expected",
        [(401, UnauthorizedError), (403, ForbiddenError), (500, UpstreamError)],
    )
    async def test_list_all_failures(
        self, run_client, recording_handler, status_code, expected
    ):
        recording_handler.respond_with(status_code, json={"message": "nope"})
        with pytest.raises(expected):
            await run_client.list_all(token=TEST_TOKEN)

    @pytest.mark.asyncio
    async def test_list_all_expects_an_array(self, run_client, recording_handler):
        recording_handler.respond_with(200, json={"items": []})
        with pytest.raises(UpstreamError):
            await run_client.list_all(token=TEST_TOKEN)

    @pytest.mark.asyncio
    async def test_get_by_id(self, run_client, recording_handler):
        recording_handler.respond_with(200, json={"RunId": "r1", "Cost": 5.5})

        run = await run_client.get_by_id("r1", token=TEST_TOKEN)

        assert recording_handler.last_request.url.path == "/api/Run/GetRunById"
        assert recording_handler.last_request.url.params["id"] == "r1"
        assert run.cost == 5.5

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, run_client, recording_handler):
        recording_handler.respond_with(404, json={"message": "Run r9 not found"})
        with pytest.raises(NotFoundError):
            await run_client.get_by_id("r9", token=TEST_TOKEN)

    @pytest.mark.asyncio
    async def test_get_by_id_requires_an_id(self, run_client, recording_handler):
        with pytest.raises(InvalidArgumentError):
            await run_client.get_by_id("", token=TEST_TOKEN)
        assert recording_handler.requests == []


@pytest.mark.unit
class TestWrites:
    @pytest.mark.asyncio
    async def test_create_returns_server_record(self, run_client, recording_handler):
        recording_handler.respond_with(200, json={"RunId": "new-id", "Name": "Run"})

        created = await run_client.create(RunEntity(name="Run"), token=TEST_TOKEN)

        request = recording_handler.last_request
        assert request.method == "POST"
        assert request.url.path == "/api/Run/CreateRun"
        assert json.loads(request.content) == {"name": "Run"}
        assert created.run_id == "new-id"

    @pytest.mark.asyncio
    async def test_create_validation_error(self, run_client, recording_handler):
        recording_handler.respond_with(
            422, json={"errors": {"Name": ["The Name field is required."]}}
        )
        with pytest.raises(ValidationError) as exc_info:
            await run_client.create(RunEntity(), token=TEST_TOKEN)
        assert exc_info.value.field_errors == {"Name": ["The Name field is required."]}

    @pytest.mark.asyncio
    async def test_update_success(self, run_client, recording_handler):
        recording_handler.respond_with(200, json={})
        assert await run_client.update(RunEntity(run_id="r1"), token=TEST_TOKEN) is True
        assert recording_handler.last_request.url.path == "/api/Run/UpdateRun"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 403, 404, 409, 500])
    async def test_update_rejection_returns_false(
        self, run_client, recording_handler, status_code
    ):
        recording_handler.respond_with(status_code, json={"message": "rejected"})
        assert await run_client.update(RunEntity(run_id="r1"), token=TEST_TOKEN) is False

    @pytest.mark.asyncio
    async def test_update_unauthorized_raises(self, run_client, recording_handler):
        recording_handler.respond_with(401, json={"message": "expired"})
        with pytest.raises(UnauthorizedError):
            await run_client.update(RunEntity(run_id="r1"), token=TEST_TOKEN)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [200, 204, 404])
    async def test_delete_success_and_idempotence(
        self, run_client, recording_handler, status_code
    ):
        recording_handler.respond_with(status_code)

        result = await run_client.delete("r1", token=TEST_TOKEN)

        assert result == DeleteResult(True, None)
        request = recording_handler.last_request
        assert request.method == "DELETE"
        assert request.url.path == "/api/Run/DeleteRun"
        assert request.url.params["id"] == "r1"

    @pytest.mark.asyncio
    async def test_delete_rejection(self, run_client, recording_handler):
        recording_handler.respond_with(409, json={"message": "Run has joined players"})

        success, error_message = await run_client.delete("r1", token=TEST_TOKEN)

        assert success is False
        assert error_message == "Run has joined players"

    @pytest.mark.asyncio
    async def test_delete_unauthorized_raises(self, run_client, recording_handler):
        recording_handler.respond_with(401)
        with pytest.raises(UnauthorizedError):
            await run_client.delete("r1", token=TEST_TOKEN)

    @pytest.mark.asyncio
    async def test_delete_forbidden_is_an_outcome(self, run_client, recording_handler):
        recording_handler.respond_with(403, json={"message": "Admins only"})
        result = await run_client.delete("r1", token=TEST_TOKEN)
        assert result == DeleteResult(False, "Admins only")
