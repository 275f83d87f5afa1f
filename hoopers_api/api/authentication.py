from typing import Annotated

from fastapi import Header

from hoopers_api.domain.exceptions import UnauthorizedError


def require_bearer_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Accept any non-empty bearer token. Token validation belongs to the identity provider."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("A bearer token is required")
    return token.strip()

