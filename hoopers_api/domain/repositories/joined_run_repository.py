import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.adapters.resource_api.port import DeleteResult
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import JOINED_RUN
from hoopers_api.domain.entities.joined_runs import (
    JoinedRunDetailEntity,
    JoinedRunEntity,
)
from hoopers_api.utils.http_errors import raise_for_status

DEFAULT_JOIN_STATUS = "Accepted"


class JoinedRunRepository(RestResourceClient[JoinedRunEntity, JoinedRunDetailEntity]):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(JOINED_RUN, http, environment_variables)

    async def list_for_profile(
        self,
        profile_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[JoinedRunDetailEntity]:
        """Runs a player has joined, with each run's schedule flattened in."""
        profile_id = self._require_id(profile_id)
        context = f"Listing joined runs for profile {profile_id}"
        response = await self._send(
            "GET",
            JOINED_RUN.route("GetUserJoinedRuns"),
            token=token,
            params={"profileId": profile_id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(JoinedRunDetailEntity, response, context)

    async def add_profile(
        self,
        profile_id: str,
        run_id: str,
        status: str = DEFAULT_JOIN_STATUS,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> bool:
        joined_run = JoinedRunEntity(
            profile_id=self._require_id(profile_id),
            run_id=self._require_id(run_id),
            status=status,
        )
        response = await self._send(
            "POST",
            JOINED_RUN.route("AddProfileToJoinedRun"),
            token=token,
            payload=joined_run.to_wire(),
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return self.outcome_of(
            response, f"Adding profile {profile_id} to run {run_id}"
        )

    async def remove_profile(
        self,
        profile_id: str,
        run_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> DeleteResult:
        """Take a player off a run. Removing someone who already left succeeds."""
        response = await self._send(
            "DELETE",
            JOINED_RUN.route("RemoveUserJoinRun"),
            token=token,
            params={
                "profileId": self._require_id(profile_id),
                "runId": self._require_id(run_id),
            },
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return self.delete_result_of(
            response, f"Removing profile {profile_id} from run {run_id}"
        )


DJoinedRunRepository = Annotated[JoinedRunRepository, Depends(JoinedRunRepository)]
