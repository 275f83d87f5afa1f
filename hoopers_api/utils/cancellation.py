import asyncio
import contextlib
from collections.abc import Awaitable
from typing import TypeVar

from hoopers_api.domain.exceptions import RequestCancelledError

T = TypeVar("T")


async def run_cancellable(
    awaitable: Awaitable[T],
    cancel_event: asyncio.Event | None = None,
    description: str = "request",
) -> T:
    """
    Await `awaitable` unless `cancel_event` fires first.

    When the event is set before or while the work is pending, the work is
    cancelled and `RequestCancelledError` is raised. Cancellation of the calling
    task itself propagates as `asyncio.CancelledError`.
    """
    if cancel_event is None:
        return await awaitable

    if cancel_event.is_set():
        if asyncio.iscoroutine(awaitable):
            awaitable.close()
        raise RequestCancelledError(f"{description} cancelled before it was sent")

    work = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        done, _ = await asyncio.wait(
            {work, waiter}, return_when=asyncio.FIRST_COMPLETED
        )
    except asyncio.CancelledError:
        work.cancel()
        waiter.cancel()
        raise

    if work in done:
        waiter.cancel()
        return work.result()

    work.cancel()
    # The work task's own CancelledError is the expected outcome here.
    with contextlib.suppress(asyncio.CancelledError):
        await work
    raise RequestCancelledError(f"{description} cancelled")
