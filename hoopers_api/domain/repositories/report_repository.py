import asyncio
from typing import Annotated

from fastapi import Depends
from pydantic import ValidationError as PydanticValidationError

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.http.port import HttpPort
from hoopers_api.domain.entities.reports import ReportCounts
from hoopers_api.domain.exceptions import UpstreamError
from hoopers_api.utils.http_errors import raise_for_status

REPORT_COUNTS_PATH = "/api/Report/StreamAllCountsAsync"


class ReportRepository:
    def __init__(self, http: DHttpxGateway):
        self.http: HttpPort = http

    async def get_counts(
        self,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> ReportCounts:
        response = await self.http.async_call(
            "GET",
            REPORT_COUNTS_PATH,
            token=token,
            timeout=timeout,
            cancel_event=cancel_event,
        )
        raise_for_status(response, "Getting report counts")
        if not isinstance(response.body, dict):
            raise UpstreamError(
                "Getting report counts: expected a JSON object from the backend",
                detail=response.text[:200],
            )
        try:
            return ReportCounts.model_validate(response.body)
        except PydanticValidationError as e:
            raise UpstreamError(
                "Getting report counts: could not decode the backend response",
                detail=str(e),
            ) from e


DReportRepository = Annotated[ReportRepository, Depends(ReportRepository)]
