import pytest

from hoopers_api.config.dependencies import (
    GlobalDependencies,
    async_shutdown,
    httpx_client,
    startup_global_dependencies,
)


@pytest.mark.unit
class TestGlobalDependencies:
    @pytest.mark.asyncio
    async def test_startup_builds_one_shared_client(
        self, fresh_environment, monkeypatch
    ):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("HOOPERS_API_BASE_URL", "https://staging.hoopers.test/")
        await async_shutdown()

        try:
            await startup_global_dependencies()
            client = GlobalDependencies().httpx_client

            assert client.base_url.host == "staging.hoopers.test"
            assert httpx_client() is client
            assert "Authorization" not in client.headers
        finally:
            await async_shutdown()

        assert client.is_closed
        assert GlobalDependencies().httpx_client is None
