import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import PROFILE
from hoopers_api.domain.entities.profiles import ProfileEntity, ScoutingReportEntity


class ProfileRepository(RestResourceClient[ProfileEntity, ProfileEntity]):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(PROFILE, http, environment_variables)

    async def update_scouting_report(
        self,
        report: ScoutingReportEntity,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> bool:
        response = await self._send(
            "POST",
            PROFILE.route("UpdateScoutingReport"),
            token=token,
            payload=report.to_wire(),
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return self.outcome_of(
            response, f"Updating scouting report for profile {report.profile_id}"
        )


DProfileRepository = Annotated[ProfileRepository, Depends(ProfileRepository)]
