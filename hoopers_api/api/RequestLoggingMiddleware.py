from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from hoopers_api.utils.logging import ctx_var_request_id


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        # Every log line for this request carries the same request id.
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        ctx_var_request_id.set(request_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response
