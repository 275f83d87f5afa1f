import asyncio
from abc import ABC, abstractmethod
from typing import Generic, NamedTuple, TypeVar

from hoopers_api.utils.model_utils import BaseModel
from hoopers_api.utils.pagination import CursorPaginatedResult, PageDirection

T = TypeVar("T", bound=BaseModel)
D = TypeVar("D", bound=BaseModel)


class DeleteResult(NamedTuple):
    success: bool
    error_message: str | None = None


class ResourceClient(ABC, Generic[T, D]):
    """
    Typed access to one backend resource.

    `T` is the resource entity and `D` the detail record returned by cursor
    listings. Every call is independent and carries its own bearer token.
    """

    @abstractmethod
    async def list_all(
        self,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[T]:
        pass

    @abstractmethod
    async def list_page(
        self,
        cursor: str | None = None,
        limit: int | None = None,
        direction: str | PageDirection = PageDirection.NEXT,
        sort_by: str | None = None,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> CursorPaginatedResult[D]:
        pass

    @abstractmethod
    async def get_by_id(
        self,
        id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> T:
        pass

    @abstractmethod
    async def create(
        self,
        entity: T,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> T:
        pass

    @abstractmethod
    async def update(
        self,
        entity: T,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> bool:
        pass

    @abstractmethod
    async def delete(
        self,
        id: str,
        *,
        token: str,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> DeleteResult:
        pass
