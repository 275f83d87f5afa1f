import mimetypes
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, BinaryIO
from urllib.parse import quote

from fastapi import Depends
from starlette.concurrency import run_in_threadpool

from hoopers_api.adapters.storage.port import StorageProvider
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.domain.entities.storage import FileMetadata
from hoopers_api.domain.exceptions import InvalidArgumentError, NotFoundError
from hoopers_api.utils.logging import make_logger

logger = make_logger(__name__)


class LocalStorageProvider(StorageProvider):
    """
    Implementation of StorageProvider that saves files to the local filesystem.
    This is suitable for development or single-instance deployments.
    """

    def __init__(self, root: str | Path = "uploads", base_url: str | None = None):
        """
        Args:
            root: Directory that holds one sub-directory per container.
            base_url: Public URL prefix for stored files. Files are addressed by
                `file://` URLs when not set.
        """
        self.root = Path(root)
        self.base_url = base_url.rstrip("/") if base_url else None
        self.root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _check_segment(value: str, label: str) -> str:
        if not value or not value.strip():
            raise InvalidArgumentError(f"A {label} is required")
        if value in (".", "..") or "/" in value or "\\" in value:
            raise InvalidArgumentError(f"Invalid {label} {value!r}")
        return value

    def _path(self, name: str, container: str) -> Path:
        container = self._check_segment(container, "container name")
        name = self._check_segment(name, "file name")
        return self.root / container / name

    def get_file_url(self, name: str, container: str) -> str:
        path = self._path(name, container)
        if self.base_url:
            return f"{self.base_url}/{quote(container)}/{quote(name)}"
        return path.resolve().as_uri()

    async def upload(self, stream: BinaryIO, name: str, container: str) -> str:
        path = self._path(name, container)

        def _save():
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as buffer:
                shutil.copyfileobj(stream, buffer)

        await run_in_threadpool(_save)
        logger.info(f"Stored {container}/{name}")
        return self.get_file_url(name, container)

    async def delete(self, name: str, container: str) -> bool:
        path = self._path(name, container)

        def _remove() -> bool:
            try:
                path.unlink()
            except FileNotFoundError:
                return False
            return True

        removed = await run_in_threadpool(_remove)
        if removed:
            logger.info(f"Deleted {container}/{name}")
        return removed

    async def exists(self, name: str, container: str) -> bool:
        path = self._path(name, container)
        return await run_in_threadpool(path.is_file)

    async def get_metadata(self, name: str, container: str) -> FileMetadata:
        path = self._path(name, container)
        if not await run_in_threadpool(path.is_file):
            raise NotFoundError(f"File {container}/{name} not found")

        stat = await run_in_threadpool(path.stat)
        content_type, _ = mimetypes.guess_type(name)
        return FileMetadata(
            name=name,
            container=container,
            size=stat.st_size,
            content_type=content_type,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            url=self.get_file_url(name, container),
        )


def local_storage_provider(
    environment_variables: DEnvironmentVariables,
) -> LocalStorageProvider:
    return LocalStorageProvider(
        root=environment_variables.STORAGE_ROOT,
        base_url=environment_variables.STORAGE_BASE_URL,
    )


DStorageProvider = Annotated[StorageProvider, Depends(local_storage_provider)]
