import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.adapters.resource_api.port import DeleteResult
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import PRIVATE_RUN_INVITE
from hoopers_api.domain.entities.private_run_invites import (
    PrivateRunInviteDetailEntity,
    PrivateRunInviteEntity,
)
from hoopers_api.utils.http_errors import raise_for_status


class PrivateRunInviteRepository(
    RestResourceClient[PrivateRunInviteEntity, PrivateRunInviteDetailEntity]
):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(PRIVATE_RUN_INVITE, http, environment_variables)

    async def list_by_profile(
        self,
        profile_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[PrivateRunInviteEntity]:
        profile_id = self._require_id(profile_id)
        context = f"Listing private run invites for profile {profile_id}"
        response = await self._send(
            "GET",
            PRIVATE_RUN_INVITE.route("GetPrivateRunInvitesByProfileId"),
            token=token,
            params={"profileId": profile_id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(PrivateRunInviteEntity, response, context)

    async def remove_profile(
        self,
        profile_id: str,
        private_run_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> DeleteResult:
        """Withdraw a player from a private run. Repeating the call succeeds."""
        response = await self._send(
            "DELETE",
            PRIVATE_RUN_INVITE.route("RemoveProfileFromPrivateRun"),
            token=token,
            params={
                "profileId": self._require_id(profile_id),
                "privateRunId": self._require_id(private_run_id),
            },
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return self.delete_result_of(
            response,
            f"Removing profile {profile_id} from private run {private_run_id}",
        )


DPrivateRunInviteRepository = Annotated[
    PrivateRunInviteRepository, Depends(PrivateRunInviteRepository)
]
