import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import CLIENT
from hoopers_api.domain.entities.clients import ClientDetailEntity, ClientEntity
from hoopers_api.domain.entities.courts import CourtEntity
from hoopers_api.utils.http_errors import raise_for_status


class ClientRepository(RestResourceClient[ClientEntity, ClientDetailEntity]):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(CLIENT, http, environment_variables)

    async def list_courts(
        self,
        client_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[CourtEntity]:
        client_id = self._require_id(client_id)
        context = f"Listing courts for client {client_id}"
        response = await self._send(
            "GET",
            CLIENT.route("GetClientCourts"),
            token=token,
            params={"clientId": client_id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(CourtEntity, response, context)


DClientRepository = Annotated[ClientRepository, Depends(ClientRepository)]
