from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from hoopers_api.config.environment_variables import EnvironmentVariables
from hoopers_api.config.resources import ResourceDefinition
from hoopers_api.domain.exceptions import InvalidArgumentError, ValidationError
from hoopers_api.domain.services.keyset_paginator import KeysetPaginator
from hoopers_api.utils.model_utils import BaseModel
from hoopers_api.utils.pagination import CursorPaginatedResult

M = TypeVar("M", bound=BaseModel)


def parse_body(model: type[M], payload: Any) -> M:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        field_errors: dict[str, list[str]] = {}
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "__root__"
            field_errors.setdefault(field, []).append(error["msg"])
        raise ValidationError(
            "One or more validation errors occurred", field_errors=field_errors
        ) from e


def resolve_limit(limit: int | None, environment_variables: EnvironmentVariables) -> int:
    if limit is None:
        return environment_variables.DEFAULT_PAGE_LIMIT
    if limit <= 0:
        raise InvalidArgumentError(f"limit must be positive, got {limit}")
    return min(limit, environment_variables.MAX_PAGE_LIMIT)


def page_to_wire(result: CursorPaginatedResult) -> dict[str, Any]:
    return {
        "items": [item.to_wire() for item in result.items],
        "nextCursor": result.next_cursor,
        "previousCursor": result.previous_cursor,
        "hasMore": result.has_more,
        "direction": result.direction.value,
        "sortBy": result.sort_by,
        "count": result.count,
    }


def paginate_records(
    definition: ResourceDefinition,
    records: list[BaseModel],
    environment_variables: EnvironmentVariables,
    cursor: str | None,
    limit: int | None,
    direction: str,
    sort_by: str | None,
) -> dict[str, Any]:
    result = KeysetPaginator(definition).paginate(
        records,
        cursor=cursor,
        limit=resolve_limit(limit, environment_variables),
        direction=direction,
        sort_by=sort_by,
    )
    return page_to_wire(result)
