import asyncio
from typing import Any, Literal, TypeVar

from pydantic import ValidationError as PydanticValidationError

from hoopers_api.adapters.http.port import HttpPort, HttpResponse
from hoopers_api.adapters.resource_api.port import D, DeleteResult, ResourceClient, T
from hoopers_api.config.environment_variables import EnvironmentVariables
from hoopers_api.config.resources import ResourceDefinition
from hoopers_api.domain.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
)
from hoopers_api.utils.http_errors import (
    error_for_status,
    extract_error_message,
    raise_for_status,
)
from hoopers_api.utils.logging import make_logger
from hoopers_api.utils.model_utils import BaseModel, normalize_key
from hoopers_api.utils.pagination import CursorPaginatedResult, PageDirection

logger = make_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class RestResourceClient(ResourceClient[T, D]):
    """
    REST implementation of `ResourceClient` for the `/api/{Resource}/...` routes.

    Paging arguments are validated locally, so a malformed request never reaches
    the network. Status codes are classified by `error_for_status`.
    """

    def __init__(
        self,
        definition: ResourceDefinition,
        http: HttpPort,
        environment_variables: EnvironmentVariables | None = None,
    ):
        self.definition = definition
        self.http = http
        self.environment_variables = (
            environment_variables or EnvironmentVariables.refresh()
        )

    @property
    def name(self) -> str:
        return self.definition.name

    async def _send(
        self,
        method: Literal["GET", "POST", "PUT", "DELETE"],
        path: str,
        *,
        token: str,
        params: dict[str, Any] | None = None,
        payload: dict | list | None = None,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        return await self.http.async_call(
            method,
            path,
            token=token,
            params=params,
            payload=payload,
            timeout=timeout,
            cancel_event=cancel_event,
        )

    @staticmethod
    def _parse(model: type[M], response: HttpResponse, context: str) -> M:
        if not isinstance(response.body, dict):
            raise UpstreamError(
                f"{context}: expected a JSON object from the backend",
                detail=response.text[:200],
            )
        try:
            return model.model_validate(response.body)
        except PydanticValidationError as e:
            raise UpstreamError(
                f"{context}: could not decode the backend response", detail=str(e)
            ) from e

    @staticmethod
    def _parse_list(model: type[M], response: HttpResponse, context: str) -> list[M]:
        if response.body is None and not response.text.strip():
            return []
        if not isinstance(response.body, list):
            raise UpstreamError(
                f"{context}: expected a JSON array from the backend",
                detail=response.text[:200],
            )
        try:
            return [model.model_validate(item) for item in response.body]
        except PydanticValidationError as e:
            raise UpstreamError(
                f"{context}: could not decode the backend response", detail=str(e)
            ) from e

    def _require_id(self, id: str | None) -> str:
        if id is None or not str(id).strip():
            raise InvalidArgumentError(f"A {self.name} id is required")
        return str(id).strip()

    def page_params(
        self,
        cursor: str | None = None,
        limit: int | None = None,
        direction: str | PageDirection = PageDirection.NEXT,
        sort_by: str | None = None,
    ) -> dict[str, Any]:
        """
        Validate cursor listing arguments and build the query string.

        Raises:
            InvalidArgumentError: For a non-positive limit, an unknown direction or
                sort field, or a `previous` request without a cursor
        """
        max_limit = self.environment_variables.MAX_PAGE_LIMIT
        if limit is None:
            limit = self.environment_variables.DEFAULT_PAGE_LIMIT
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise InvalidArgumentError(f"limit must be an integer, got {limit!r}")
        if limit <= 0:
            raise InvalidArgumentError(f"limit must be positive, got {limit}")
        if limit > max_limit:
            logger.warning(
                f"Requested limit {limit} for {self.name} exceeds {max_limit}; clamping"
            )
            limit = max_limit

        page_direction = PageDirection.parse(direction)
        sort_field = self.definition.resolve_sort(sort_by)

        if cursor is not None and not cursor.strip():
            cursor = None
        if cursor is None and page_direction == PageDirection.PREVIOUS:
            raise InvalidArgumentError(
                "A cursor is required to request the previous page"
            )

        return {
            "cursor": cursor,
            "limit": limit,
            "direction": page_direction.value,
            "sortBy": sort_field.name,
        }

    async def fetch_page(
        self,
        path: str,
        params: dict[str, Any],
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> CursorPaginatedResult[D]:
        """Request one cursor page from `path` with already validated `params`."""
        context = f"Listing {self.definition.plural_name}"
        logger.debug(
            f"{context} page: direction={params['direction']} "
            f"sortBy={params['sortBy']} limit={params['limit']}"
        )
        response = await self._send(
            "GET",
            path,
            token=token,
            params=params,
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        if not isinstance(response.body, dict):
            raise UpstreamError(
                f"{context}: expected a paginated JSON object from the backend",
                detail=response.text[:200],
            )

        envelope = dict(response.body)
        present = {normalize_key(str(key)) for key in envelope}
        # hasMore follows the requested direction when the backend omits the echo.
        if "direction" not in present:
            envelope["direction"] = params["direction"]
        if "sortby" not in present:
            envelope["sortBy"] = params["sortBy"]

        try:
            return CursorPaginatedResult[self.definition.detail].model_validate(
                envelope
            )
        except PydanticValidationError as e:
            raise UpstreamError(
                f"{context}: could not decode the backend response", detail=str(e)
            ) from e

    async def list_all(
        self,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[T]:
        context = f"Listing {self.definition.plural_name}"
        response = await self._send(
            "GET",
            self.definition.list_all_path,
            token=token,
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(self.definition.entity, response, context)

    async def list_page(
        self,
        cursor: str | None = None,
        limit: int | None = None,
        direction: str | PageDirection = PageDirection.NEXT,
        sort_by: str | None = None,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> CursorPaginatedResult[D]:
        params = self.page_params(cursor, limit, direction, sort_by)
        return await self.fetch_page(
            self.definition.list_page_path,
            params,
            token=token,
            cancel_event=cancel_event,
            timeout=timeout,
        )

    async def get_by_id(
        self,
        id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> T:
        id = self._require_id(id)
        context = f"Getting {self.name} {id}"
        response = await self._send(
            "GET",
            self.definition.get_by_id_path,
            token=token,
            params={"id": id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        if response.body is None and not response.text.strip():
            raise NotFoundError(f"{self.name} {id} not found")
        return self._parse(self.definition.entity, response, context)

    async def create(
        self,
        entity: T,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> T:
        context = f"Creating {self.name}"
        response = await self._send(
            "POST",
            self.definition.create_path,
            token=token,
            payload=entity.to_wire(),
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        created = self._parse(self.definition.entity, response, context)
        logger.info(f"Created {self.name} {self.definition.id_of(created)}")
        return created

    async def update(
        self,
        entity: T,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> bool:
        """
        Replace a record. Returns False when the backend rejects the update;
        raises only for auth failures, transport failures and cancellation.
        """
        entity_id = self.definition.id_of(entity)
        response = await self._send(
            "POST",
            self.definition.update_path,
            token=token,
            payload=entity.to_wire(),
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return self.outcome_of(response, f"Updating {self.name} {entity_id}")

    async def delete(
        self,
        id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> DeleteResult:
        """
        Delete a record. A record that is already gone counts as deleted, so
        repeating a delete is safe.
        """
        id = self._require_id(id)
        response = await self._send(
            "DELETE",
            self.definition.delete_path,
            token=token,
            params={"id": id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return self.delete_result_of(response, f"Deleting {self.name} {id}")

    @staticmethod
    def outcome_of(response: HttpResponse, context: str) -> bool:
        if response.is_success:
            return True
        if response.status_code == 401:
            raise error_for_status(response, context)
        logger.warning(
            f"{context} failed with status {response.status_code}: "
            f"{extract_error_message(response)}"
        )
        return False

    @staticmethod
    def delete_result_of(response: HttpResponse, context: str) -> DeleteResult:
        if response.is_success:
            return DeleteResult(True)
        if response.status_code == 404:
            logger.info(f"{context}: already deleted")
            return DeleteResult(True)
        if response.status_code == 401:
            raise UnauthorizedError(
                f"{context}: {extract_error_message(response) or 'unauthorized'}"
            )
        message = extract_error_message(response) or f"HTTP {response.status_code}"
        logger.warning(f"{context} failed with status {response.status_code}: {message}")
        return DeleteResult(False, message)
