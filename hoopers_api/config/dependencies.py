from typing import Annotated

import httpx
from fastapi import Depends

from hoopers_api.config.environment_variables import EnvironmentVariables
from hoopers_api.utils.logging import make_logger

logger = make_logger(__name__)

# Connection pool limits for the shared backend client
DEFAULT_LIMITS = httpx.Limits(
    max_keepalive_connections=100,
    max_connections=200,
    keepalive_expiry=30,
)


class Singleton(type):
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class GlobalDependencies(metaclass=Singleton):
    def __init__(self):
        self.environment_variables: EnvironmentVariables = (
            EnvironmentVariables.refresh()
        )
        self.httpx_client: httpx.AsyncClient | None = None
        self._loaded = False

    def create_httpx_client(self) -> httpx.AsyncClient:
        env = self.environment_variables
        timeout = httpx.Timeout(
            connect=env.HTTPX_CONNECT_TIMEOUT,
            read=env.HTTPX_READ_TIMEOUT,
            write=env.HTTPX_WRITE_TIMEOUT,
            pool=env.HTTPX_POOL_TIMEOUT,
        )
        client = httpx.AsyncClient(
            base_url=env.HOOPERS_API_BASE_URL.rstrip("/"),
            limits=DEFAULT_LIMITS,
            timeout=timeout,
            http2=True,
            follow_redirects=True,
        )
        logger.info(
            f"Created shared httpx client for {env.HOOPERS_API_BASE_URL} (id: {id(client)})"
        )
        return client

    async def load(self):
        if self._loaded:
            return

        self.environment_variables = EnvironmentVariables.refresh()
        self.httpx_client = self.create_httpx_client()
        self._loaded = True


async def startup_global_dependencies():
    global_dependencies = GlobalDependencies()
    await global_dependencies.load()


async def async_shutdown():
    global_dependencies = GlobalDependencies()

    if global_dependencies.httpx_client:
        await global_dependencies.httpx_client.aclose()
        global_dependencies.httpx_client = None
        logger.info("Closed shared httpx client")
    global_dependencies._loaded = False


def resolve_environment_variable_dependency(environment_variable_key: str):
    return getattr(GlobalDependencies().environment_variables, environment_variable_key)


def httpx_client() -> httpx.AsyncClient:
    global_dependencies = GlobalDependencies()
    if global_dependencies.httpx_client is None:
        global_dependencies.httpx_client = global_dependencies.create_httpx_client()
        global_dependencies._loaded = True
    return global_dependencies.httpx_client


DEnvironmentVariables = Annotated[
    EnvironmentVariables, Depends(lambda: GlobalDependencies().environment_variables)
]
DHttpxClient = Annotated[httpx.AsyncClient, Depends(httpx_client)]
