from collections.abc import Callable

from fastapi import BackgroundTasks, Request, Response
from fastapi.routing import APIRoute
from starlette.background import BackgroundTask

from hoopers_api.utils.logging import ctx_var_request_id, make_logger
from hoopers_api.utils.request_utils import decode_request_body, strip_sensitive_items

logger = make_logger(__name__)


def log_request(request_id: str, request: Request, request_body: bytes):
    raw_path = request.scope["root_path"] + request.scope["route"].path
    request_dict = decode_request_body(request_body)
    logger.info(
        f"Request [{request.method} {raw_path}] ({request_id})",
        extra={
            "method": request.method,
            "path": raw_path,
            "query_params": strip_sensitive_items(dict(request.query_params)),
            "headers": strip_sensitive_items(request.headers),
            "body": request_dict,
            "request_id": request_id,
        },
    )


def log_response(request_id: str, request: Request, response: Response):
    logger.info(
        f"Response[{response.status_code}] [{request.method} {request.url.path}] ({request_id})",
        extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": request.url.path,
            "request_id": request_id,
        },
    )


class LoggedAPIRoute(APIRoute):
    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        def add_logging_to_background_tasks(
            response: Response, request_id: str, request: Request
        ) -> BackgroundTasks | BackgroundTask:
            logging_task = BackgroundTask(log_response, request_id, request, response)
            if isinstance(response.background, BackgroundTasks):
                response.background.add_task(logging_task)
                return response.background
            return logging_task

        async def custom_route_handler(request: Request) -> Response:
            request_body = await request.body()
            request_id = ctx_var_request_id.get(None) or "-"
            log_request(request_id, request, request_body)
            response = await original_route_handler(request)
            response.background = add_logging_to_background_tasks(
                response, request_id, request
            )
            return response

        return custom_route_handler
