import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import ORDER
from hoopers_api.domain.entities.orders import OrderDetailEntity, OrderEntity
from hoopers_api.utils.http_errors import raise_for_status


class OrderRepository(RestResourceClient[OrderEntity, OrderDetailEntity]):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(ORDER, http, environment_variables)

    async def list_by_profile(
        self,
        profile_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[OrderEntity]:
        """A player's order history."""
        profile_id = self._require_id(profile_id)
        context = f"Listing orders for profile {profile_id}"
        response = await self._send(
            "GET",
            ORDER.route("GetOrderByProfileId"),
            token=token,
            params={"profileId": profile_id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(OrderEntity, response, context)


DOrderRepository = Annotated[OrderRepository, Depends(OrderRepository)]
