from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

from hoopers_api.utils.logging import make_logger
from hoopers_api.utils.model_utils import BaseModel

PROJECT_ROOT = Path(__file__).resolve().parents[2]
logger = make_logger(__name__)

DEFAULT_BASE_URL = "https://ultimatehoopersapi.azurewebsites.net"


class EnvVarKeys(str, Enum):
    ENVIRONMENT = "ENVIRONMENT"
    HOOPERS_API_BASE_URL = "HOOPERS_API_BASE_URL"
    HTTPX_CONNECT_TIMEOUT = "HTTPX_CONNECT_TIMEOUT"
    HTTPX_READ_TIMEOUT = "HTTPX_READ_TIMEOUT"
    HTTPX_WRITE_TIMEOUT = "HTTPX_WRITE_TIMEOUT"
    HTTPX_POOL_TIMEOUT = "HTTPX_POOL_TIMEOUT"
    DEFAULT_PAGE_LIMIT = "DEFAULT_PAGE_LIMIT"
    MAX_PAGE_LIMIT = "MAX_PAGE_LIMIT"
    STORAGE_ROOT = "STORAGE_ROOT"
    STORAGE_BASE_URL = "STORAGE_BASE_URL"
    ALLOWED_ORIGINS = "ALLOWED_ORIGINS"


class Environment(str, Enum):
    DEV = "development"
    STAGING = "staging"
    PROD = "production"


refreshed_environment_variables = None


class EnvironmentVariables(BaseModel):
    ENVIRONMENT: str | None = Environment.DEV
    HOOPERS_API_BASE_URL: str = DEFAULT_BASE_URL
    HTTPX_CONNECT_TIMEOUT: float = 10.0  # HTTPX connection timeout in seconds
    HTTPX_READ_TIMEOUT: float = 30.0  # HTTPX read timeout in seconds
    HTTPX_WRITE_TIMEOUT: float = 30.0  # HTTPX write timeout in seconds
    HTTPX_POOL_TIMEOUT: float = 10.0  # HTTPX pool timeout in seconds
    DEFAULT_PAGE_LIMIT: int = 20
    MAX_PAGE_LIMIT: int = 100  # Larger page requests are clamped to this
    STORAGE_ROOT: str = "uploads"
    STORAGE_BASE_URL: str | None = None
    ALLOWED_ORIGINS: str | None = None

    @classmethod
    def refresh(cls, force_refresh: bool = False) -> EnvironmentVariables:
        global refreshed_environment_variables
        if refreshed_environment_variables is not None and not force_refresh:
            return refreshed_environment_variables

        if os.environ.get(EnvVarKeys.ENVIRONMENT) == Environment.DEV:
            load_dotenv(dotenv_path=Path(PROJECT_ROOT / ".env"), override=True)
        environment_variables = EnvironmentVariables(
            ENVIRONMENT=os.environ.get(EnvVarKeys.ENVIRONMENT, Environment.DEV),
            HOOPERS_API_BASE_URL=os.environ.get(
                EnvVarKeys.HOOPERS_API_BASE_URL, DEFAULT_BASE_URL
            ),
            HTTPX_CONNECT_TIMEOUT=float(
                os.environ.get(EnvVarKeys.HTTPX_CONNECT_TIMEOUT, "10.0")
            ),
            HTTPX_READ_TIMEOUT=float(
                os.environ.get(EnvVarKeys.HTTPX_READ_TIMEOUT, "30.0")
            ),
            HTTPX_WRITE_TIMEOUT=float(
                os.environ.get(EnvVarKeys.HTTPX_WRITE_TIMEOUT, "30.0")
            ),
            HTTPX_POOL_TIMEOUT=float(
                os.environ.get(EnvVarKeys.HTTPX_POOL_TIMEOUT, "10.0")
            ),
            DEFAULT_PAGE_LIMIT=int(os.environ.get(EnvVarKeys.DEFAULT_PAGE_LIMIT, "20")),
            MAX_PAGE_LIMIT=int(os.environ.get(EnvVarKeys.MAX_PAGE_LIMIT, "100")),
            STORAGE_ROOT=os.environ.get(EnvVarKeys.STORAGE_ROOT, "uploads"),
            STORAGE_BASE_URL=os.environ.get(EnvVarKeys.STORAGE_BASE_URL),
            ALLOWED_ORIGINS=os.environ.get(EnvVarKeys.ALLOWED_ORIGINS, "*"),
        )
        if environment_variables.DEFAULT_PAGE_LIMIT > environment_variables.MAX_PAGE_LIMIT:
            logger.warning(
                f"DEFAULT_PAGE_LIMIT {environment_variables.DEFAULT_PAGE_LIMIT} exceeds "
                f"MAX_PAGE_LIMIT {environment_variables.MAX_PAGE_LIMIT}; using the maximum"
            )
            environment_variables.DEFAULT_PAGE_LIMIT = environment_variables.MAX_PAGE_LIMIT
        refreshed_environment_variables = environment_variables
        return refreshed_environment_variables

    @classmethod
    def clear_cache(cls):
        """Clear the cached environment variables to force refresh on next access"""
        global refreshed_environment_variables
        refreshed_environment_variables = None
