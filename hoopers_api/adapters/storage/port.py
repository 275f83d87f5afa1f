from abc import ABC, abstractmethod
from typing import BinaryIO

from hoopers_api.domain.entities.storage import FileMetadata


class StorageProvider(ABC):
    """Blob storage for uploaded images and videos, grouped into containers."""

    @abstractmethod
    async def upload(self, stream: BinaryIO, name: str, container: str) -> str:
        """
        Store the stream under `container/name`, replacing any existing file,
        and return its public URL.
        """
        pass

    @abstractmethod
    async def delete(self, name: str, container: str) -> bool:
        """Return True if a file was removed, False if there was nothing to remove."""
        pass

    @abstractmethod
    async def exists(self, name: str, container: str) -> bool:
        pass

    @abstractmethod
    def get_file_url(self, name: str, container: str) -> str:
        pass

    @abstractmethod
    async def get_metadata(self, name: str, container: str) -> FileMetadata:
        """
        Raises:
            NotFoundError: If the file does not exist
        """
        pass
