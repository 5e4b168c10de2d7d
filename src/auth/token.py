"""Bearer token extraction and caller identity."""

import jwt

from src.exceptions import UnauthorizedError


def get_bearer_token(authorization: str | None) -> str:
    """
    Extract the bearer credential from an Authorization header value.

    Args:
        authorization: Raw header value, expected as "Bearer <token>"

    Returns:
        The token part of the header

    Raises:
        UnauthorizedError: If the header is missing or malformed
    """
    if not authorization:
        raise UnauthorizedError(
            message="Missing Authorization header",
            details={"hint": "Include 'Authorization: Bearer <token>'"},
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise UnauthorizedError(
            message="Invalid Authorization header format",
            details={"hint": "Use format 'Authorization: Bearer <token>'"},
        )

    return parts[1]


def parse_user_id(token: str) -> str:
    """
    Read the caller's user id from the ``sub`` claim of a JWT.

    The signature is not checked here: API Gateway only invokes the
    handlers after the custom authorizer has verified the token.

    Args:
        token: Encoded JWT

    Returns:
        The ``sub`` claim

    Raises:
        UnauthorizedError: If the token cannot be decoded or has no subject
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as exc:
        raise UnauthorizedError(
            message="Bearer token is not a valid JWT",
            details={"reason": str(exc)},
        ) from exc

    user_id = claims.get("sub")
    if not user_id:
        raise UnauthorizedError(message="Bearer token has no subject claim")

    return user_id
