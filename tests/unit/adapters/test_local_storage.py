import io

import pytest

from hoopers_api.adapters.storage.local_storage import LocalStorageProvider
from hoopers_api.domain.exceptions import InvalidArgumentError, NotFoundError


@pytest.fixture
def storage(tmp_path):
    return LocalStorageProvider(root=tmp_path, base_url="https://cdn.hoopers.test/")


@pytest.mark.unit
class TestLocalStorageProvider:
    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self, storage, tmp_path):
        url = await storage.upload(io.BytesIO(b"jpeg-bytes"), "court.jpg", "images")

        assert url == "https://cdn.hoopers.test/images/court.jpg"
        assert (tmp_path / "images" / "court.jpg").read_bytes() == b"jpeg-bytes"
        assert await storage.exists("court.jpg", "images") is True

    @pytest.mark.asyncio
    async def test_upload_replaces_existing_file(self, storage):
        await storage.upload(io.BytesIO(b"old"), "clip.mp4", "videos")
        await storage.upload(io.BytesIO(b"newer"), "clip.mp4", "videos")

        metadata = await storage.get_metadata("clip.mp4", "videos")

        assert metadata.size == 5
        assert metadata.content_type == "video/mp4"
        assert metadata.url.endswith("/videos/clip.mp4")

    @pytest.mark.asyncio
    async def test_delete(self, storage):
        await storage.upload(io.BytesIO(b"x"), "post.png", "posts")

        assert await storage.delete("post.png", "posts") is True
        assert await storage.delete("post.png", "posts") is False
        assert await storage.exists("post.png", "posts") is False

    @pytest.mark.asyncio
    async def test_missing_metadata(self, storage):
        with pytest.raises(NotFoundError):
            await storage.get_metadata("missing.png", "images")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name, container",
        [("../escape.png", "images"), ("a.png", ".."), ("", "images")],
    )
    async def test_rejects_path_tricks(self, storage, name, container):
        with pytest.raises(InvalidArgumentError):
            await storage.upload(io.BytesIO(b"x"), name, container)

    def test_file_urls_without_base_url(self, tmp_path):
        storage = LocalStorageProvider(root=tmp_path)
        assert storage.get_file_url("a.png", "images").startswith("file://")
