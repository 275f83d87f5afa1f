from hoopers_api.adapters.authentication.port import TokenProvider
from hoopers_api.domain.exceptions import UnauthorizedError


class StaticTokenProvider(TokenProvider):
    """Hands out one fixed token, e.g. a session token issued at sign-in."""

    def __init__(self, token: str):
        self._token = token

    async def get_token(self) -> str:
        if not self._token or not self._token.strip():
            raise UnauthorizedError("No access token is available")
        return self._token

