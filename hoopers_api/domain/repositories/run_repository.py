import asyncio
from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import JOINED_RUN, RUN
from hoopers_api.domain.entities.joined_runs import JoinedRunEntity
from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.domain.entities.runs import RunDetailEntity, RunEntity
from hoopers_api.utils.http_errors import raise_for_status
from hoopers_api.utils.logging import make_logger

logger = make_logger(__name__)


class RunRepository(RestResourceClient[RunEntity, RunDetailEntity]):
    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        super().__init__(RUN, http, environment_variables)

    async def join_run(
        self,
        joined_run: JoinedRunEntity,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> bool:
        """Sign a player up for a run. Returns False if the backend refuses."""
        response = await self._send(
            "POST",
            JOINED_RUN.create_path,
            token=token,
            payload=joined_run.to_wire(),
            cancel_event=cancel_event,
            timeout=timeout,
        )
        return self.outcome_of(
            response,
            f"Joining profile {joined_run.profile_id} to run {joined_run.run_id}",
        )

    async def list_joined_profiles(
        self,
        run_id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[ProfileEntity]:
        run_id = self._require_id(run_id)
        context = f"Listing profiles joined to run {run_id}"
        response = await self._send(
            "GET",
            RUN.route("GetJoinedRunProfilesByRunId"),
            token=token,
            params={"runId": run_id},
            cancel_event=cancel_event,
            timeout=timeout,
        )
        raise_for_status(response, context)
        return self._parse_list(ProfileEntity, response, context)


DRunRepository = Annotated[RunRepository, Depends(RunRepository)]
