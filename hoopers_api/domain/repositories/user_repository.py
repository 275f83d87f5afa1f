import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import USER
from hoopers_api.domain.entities.users import UserDetailEntity, UserEntity
from hoopers_api.domain.exceptions import InvalidArgumentError
from hoopers_api.utils.http_errors import raise_for_status


class UserRepository(RestResourceClient[UserEntity, UserDetailEntity]):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(USER, http, environment_variables)

    async def search(
        self,
        query: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[UserEntity]:
        """Find users whose name, user name or email matches `query`."""
        if query is None or not query.strip():
            raise InvalidArgumentError("A search query is required")
        context = "Searching users"
        response = await self._send(
            "GET",
            USER.route("GetUsersSearch"),
            token=token,
            params={"searchQuery": query.strip()},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(UserEntity, response, context)


DUserRepository = Annotated[UserRepository, Depends(UserRepository)]
