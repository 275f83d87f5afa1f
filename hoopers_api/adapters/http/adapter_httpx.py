import asyncio
from typing import Annotated, Any, Literal

import httpx
from fastapi import Depends
from httpx import ConnectError, TimeoutException

from hoopers_api.adapters.http.port import HttpPort, HttpResponse
from hoopers_api.config.dependencies import DHttpxClient
from hoopers_api.domain.exceptions import TransportError, UnauthorizedError
from hoopers_api.utils.cancellation import run_cancellable
from hoopers_api.utils.logging import make_logger

logger = make_logger(__name__)


def bearer_headers(token: str | None) -> dict[str, str]:
    if not token or not token.strip():
        raise UnauthorizedError("An access token is required")
    return {
        "Authorization": f"Bearer {token.strip()}",
        "Accept": "application/json",
    }


class HttpxGateway(HttpPort):
    """
    Sends backend requests through a pooled `httpx.AsyncClient`.

    The client is shared and never mutated: the bearer token travels as a
    per-request header, so concurrent callers with different tokens can reuse
    the same connection pool.
    """

    def __init__(self, client: DHttpxClient):
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def async_call(
        self,
        method: Literal["GET", "POST", "PUT", "DELETE"],
        path: str,
        *,
        token: str | None,
        params: dict[str, Any] | None = None,
        payload: dict | list | None = None,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> HttpResponse:
        """Make an async HTTP call using the shared client with connection pool."""
        headers = bearer_headers(token)

        request_kwargs: dict[str, Any] = {
            "method": method,
            "url": path,
            "headers": headers,
        }
        if params:
            request_kwargs["params"] = {
                key: value for key, value in params.items() if value is not None
            }
        if payload is not None:
            request_kwargs["json"] = payload
        if timeout is not None:
            request_kwargs["timeout"] = float(timeout)

        logger.debug(f"Making {method} request to {path}")
        try:
            response = await run_cancellable(
                self._client.request(**request_kwargs),
                cancel_event,
                description=f"{method} {path}",
            )
        except TimeoutException as e:
            logger.warning(f"Timeout error for {method} {path}: {e}")
            raise TransportError(
                message=f"Request timed out: {method} {path}", detail=str(e)
            ) from e
        except ConnectError as e:
            logger.warning(f"Connection error for {method} {path}: {e}")
            raise TransportError(
                message=f"Could not connect to backend: {method} {path}",
                detail=str(e),
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"Transport error for {method} {path}: {e}")
            raise TransportError(
                message=f"Request failed: {method} {path}", detail=str(e)
            ) from e

        logger.debug(f"{method} request to {path} returned {response.status_code}")
        return HttpResponse(
            status_code=response.status_code,
            body=self._decode_body(response),
            text=response.text,
            headers=dict(response.headers),
        )

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None


DHttpxGateway = Annotated[HttpxGateway, Depends(HttpxGateway)]
