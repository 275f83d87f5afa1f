from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hoopers_api.api.in_memory_store import InMemoryRecordStore
from hoopers_api.api.RequestLoggingMiddleware import RequestLoggingMiddleware
from hoopers_api.api.routes import extras
from hoopers_api.api.routes.resources import build_resource_router
from hoopers_api.config import dependencies
from hoopers_api.config.dependencies import resolve_environment_variable_dependency
from hoopers_api.config.environment_variables import EnvVarKeys
from hoopers_api.config.resources import RESOURCES
from hoopers_api.domain.exceptions import GenericException, ValidationError
from hoopers_api.utils.logging import make_logger

logger = make_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    await dependencies.startup_global_dependencies()
    yield
    await dependencies.async_shutdown()


def format_error_response(
    detail: str,
    status_code: int,
    errors: dict[str, list[str]] | None = None,
) -> JSONResponse:
    content = {"message": detail, "code": status_code, "data": None}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error["loc"] if part not in ("query", "body")]
        errors.setdefault(".".join(location) or "__root__", []).append(error["msg"])
    logger.warning(f"{request.method} {request.url.path}: invalid request {errors}")
    return format_error_response(
        "One or more validation errors occurred", status.HTTP_400_BAD_REQUEST, errors
    )


async def handle_generic(request: Request, exc: GenericException):
    if exc.code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    errors = exc.field_errors if isinstance(exc, ValidationError) else None
    return format_error_response(exc.message, exc.code, errors)


async def handle_http_exc(request: Request, exc: HTTPException):
    return format_error_response(str(exc.detail), exc.status_code)


async def handle_unexpected(request: Request, exc: Exception):
    logger.exception(
        f"{request.method} {request.url.path}: unhandled {exc.__class__.__name__}",
        exc_info=exc,
    )
    return format_error_response("Internal Server Error", 500)


def create_app(store: InMemoryRecordStore | None = None) -> FastAPI:
    """
    Build the reference backend serving every resource from `store`.

    Each resource gets the `/api/{Resource}/...` CRUD and cursor routes, plus
    the resource-specific routes in `extras`. Any non-empty bearer token is
    accepted.
    """
    fastapi_app = FastAPI(
        title="Hoopers API",
        openapi_url="/openapi.json",
        docs_url="/swagger",
        lifespan=lifespan,
        separate_input_output_schemas=False,
    )
    fastapi_app.state.store = store if store is not None else InMemoryRecordStore()

    allowed_origins = resolve_environment_variable_dependency(
        EnvVarKeys.ALLOWED_ORIGINS
    )
    allowed_origins_list = (
        [origin.strip() for origin in allowed_origins.split(",")]
        if allowed_origins and isinstance(allowed_origins, str)
        else ["*"]
    )
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_middleware(RequestLoggingMiddleware)

    fastapi_app.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    fastapi_app.add_exception_handler(GenericException, handle_generic)
    fastapi_app.add_exception_handler(HTTPException, handle_http_exc)
    fastapi_app.add_exception_handler(Exception, handle_unexpected)

    @fastapi_app.get("/healthz", include_in_schema=False)
    async def healthz():
        return {"status": "ok"}

    for definition in RESOURCES.values():
        fastapi_app.include_router(build_resource_router(definition))
    for router in extras.routers:
        fastapi_app.include_router(router)

    return fastapi_app
