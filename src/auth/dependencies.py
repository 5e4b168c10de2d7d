"""FastAPI dependencies for bearer token authentication."""

from fastapi import Header

from src.auth.token import get_bearer_token


async def require_bearer_token(
    authorization: str | None = Header(None),
) -> str:
    """
    Return the bearer token from the Authorization header.

    The token is passed on untouched; resolving the caller is left to the
    service layer.

    Raises:
        UnauthorizedError: If the header is missing or malformed
    """
    return get_bearer_token(authorization)
