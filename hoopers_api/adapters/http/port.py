import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None  # Decoded JSON, or None when the body is empty or not JSON
    text: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class HttpPort(ABC):
    @abstractmethod
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
        """
        Send one authenticated request and return the response whatever its
        status. Raises only for failures that produced no response.
        """
        pass
