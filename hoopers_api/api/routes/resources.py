from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from hoopers_api.api.authentication import require_bearer_token
from hoopers_api.api.in_memory_store import DRecordStore
from hoopers_api.api.logged_api_route import LoggedAPIRoute
from hoopers_api.api.routes.paging import paginate_records, parse_body
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import ResourceDefinition
from hoopers_api.utils.logging import make_logger

logger = make_logger(__name__)


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    """The six CRUD and cursor listing routes for one resource."""
    router = APIRouter(
        prefix=definition.base_path,
        tags=[definition.name],
        dependencies=[Depends(require_bearer_token)],
        route_class=LoggedAPIRoute,
    )
    plural = definition.plural_name

    @router.get(
        f"/Get{plural}",
        summary=f"List {plural}",
        operation_id=f"get_{definition.name}_list",
    )
    async def list_all(store: DRecordStore) -> list[dict[str, Any]]:
        return [record.to_wire() for record in store.records(definition)]

    @router.get(
        f"/Get{definition.name}ById",
        summary=f"Get {definition.name} by ID",
        operation_id=f"get_{definition.name}_by_id",
    )
    async def get_by_id(
        store: DRecordStore,
        id: Annotated[str, Query()],
    ) -> dict[str, Any]:
        return store.get(definition, id).to_wire()

    @router.get(
        f"/Get{plural}WithCursor",
        summary=f"List {plural} with cursor pagination",
        operation_id=f"get_{definition.name}_page",
    )
    async def list_page(
        store: DRecordStore,
        environment_variables: DEnvironmentVariables,
        cursor: Annotated[str | None, Query()] = None,
        limit: Annotated[int | None, Query()] = None,
        direction: Annotated[str, Query()] = "next",
        sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    ) -> dict[str, Any]:
        return paginate_records(
            definition,
            store.records(definition),
            environment_variables,
            cursor,
            limit,
            direction,
            sort_by,
        )

    @router.post(
        f"/Create{definition.name}",
        summary=f"Create {definition.name}",
        operation_id=f"create_{definition.name}",
    )
    async def create(
        store: DRecordStore,
        payload: Annotated[Any, Body()],
    ) -> dict[str, Any]:
        record = parse_body(definition.entity, payload)
        return store.create(definition, record).to_wire()

    @router.post(
        f"/Update{definition.name}",
        summary=f"Update {definition.name}",
        operation_id=f"update_{definition.name}",
    )
    async def update(
        store: DRecordStore,
        payload: Annotated[Any, Body()],
    ) -> dict[str, Any]:
        record = parse_body(definition.entity, payload)
        return store.update(definition, record).to_wire()

    @router.delete(
        f"/Delete{definition.name}",
        summary=f"Delete {definition.name}",
        operation_id=f"delete_{definition.name}",
    )
    async def delete(
        store: DRecordStore,
        id: Annotated[str, Query()],
    ) -> dict[str, Any]:
        store.delete(definition, id)
        return {"message": f"{definition.name} {id} deleted"}

    return router
