from abc import ABC, abstractmethod


class TokenProvider(ABC):
    @abstractmethod
    async def get_token(self) -> str:
        """Return a bearer token for the next request. Raise UnauthorizedError if none is available."""
        pass


async def resolve_token(token: "str | TokenProvider") -> str:
    if isinstance(token, TokenProvider):
        return await token.get_token()
    return token
