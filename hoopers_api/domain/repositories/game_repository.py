import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import GAME
from hoopers_api.domain.entities.games import GameDetailEntity, GameEntity
from hoopers_api.utils.http_errors import raise_for_status
from hoopers_api.utils.pagination import CursorPaginatedResult, PageDirection


class GameRepository(RestResourceClient[GameEntity, GameDetailEntity]):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(GAME, http, environment_variables)

    async def list_by_profile(
        self,
        profile_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[GameEntity]:
        profile_id = self._require_id(profile_id)
        context = f"Listing games for profile {profile_id}"
        response = await self._send(
            "GET",
            GAME.route("GetGamesByProfileId"),
            token=token,
            params={"profileId": profile_id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(GameEntity, response, context)

    async def list_page_by_profile(
        self,
        profile_id: str,
        cursor: str | None = None,
        limit: int | None = None,
        direction: str | PageDirection = PageDirection.NEXT,
        sort_by: str | None = None,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> CursorPaginatedResult[GameDetailEntity]:
        profile_id = self._require_id(profile_id)
        params = self.page_params(cursor, limit, direction, sort_by)
        params["profileId"] = profile_id
        return await self.fetch_page(
            GAME.route("GetGamesByProfileIdWithCursor"),
            params,
            token=token,
            cancel_event=cancel_event,
            timeout=timeout,
        )

    async def list_page_by_client(
        self,
        client_id: str,
        cursor: str | None = None,
        limit: int | None = None,
        direction: str | PageDirection = PageDirection.NEXT,
        sort_by: str | None = None,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> CursorPaginatedResult[GameDetailEntity]:
        client_id = self._require_id(client_id)
        params = self.page_params(cursor, limit, direction, sort_by)
        params["clientId"] = client_id
        return await self.fetch_page(
            GAME.route("GetGamesByClientIdWithCursor"),
            params,
            token=token,
            cancel_event=cancel_event,
            timeout=timeout,
        )


DGameRepository = Annotated[GameRepository, Depends(GameRepository)]
