"""AWS Lambda handler for the Todo API.

The FastAPI application is wrapped with the Mangum adapter, which turns
API Gateway proxy events into ASGI requests and back. ``with_cors`` then
decorates every response the adapter produces, and turns a fault escaping
the adapter into a 500 that still carries the CORS headers so browsers can
read it.
"""

import functools
import json
from collections.abc import Callable
from typing import Any

from mangum import Mangum

from src.config import settings
from src.logging.config import get_logger
from src.main import app

logger = get_logger(__name__)

LambdaHandler = Callable[[dict, Any], dict]


def request_origin(event: dict) -> str | None:
    """Return the Origin header of an API Gateway event, whatever its casing."""
    for name, value in (event.get("headers") or {}).items():
        if name.lower() == "origin":
            return value
    return None


def cors_headers(origin: str | None = None) -> dict[str, str]:
    """
    Return the headers that allow credentialed cross-origin calls.

    Browsers refuse a wildcard origin on credentialed requests, so with
    credentials enabled a wildcard is answered with the caller's own origin.

    Args:
        origin: Origin header of the request, if any

    Returns:
        Header name to value
    """
    echo_origin = bool(
        settings.cors_allow_origin == "*" and settings.cors_allow_credentials and origin
    )

    headers = {
        "Access-Control-Allow-Origin": origin if echo_origin else settings.cors_allow_origin
    }
    if echo_origin:
        # The answer depends on the caller, so shared caches must key on it
        headers["Vary"] = "Origin"
    if settings.cors_allow_credentials:
        headers["Access-Control-Allow-Credentials"] = "true"
    return headers


def with_cors(handler: LambdaHandler) -> LambdaHandler:
    """
    Wrap a Lambda handler so every response carries the CORS headers.

    Args:
        handler: Lambda handler returning an API Gateway response dict

    Returns:
        Handler with the same signature
    """

    @functools.wraps(handler)
    def wrapper(event: dict, context: Any) -> dict:
        try:
            response = handler(event, context)
        except Exception as exc:
            logger.error(
                f"Unhandled exception in Lambda handler: {type(exc).__name__}",
                exc_info=exc,
                extra={
                    "context": {
                        "path": event.get("path"),
                        "method": event.get("httpMethod"),
                    }
                },
            )
            response = {
                "statusCode": 500,
                "headers": {"Content-Type": "application/json"},
                "body": json.dumps(
                    {
                        "status": "error",
                        "error_code": "INTERNAL_ERROR",
                        "message": "An internal error occurred.",
                        "details": {},
                    }
                ),
                "isBase64Encoded": False,
            }

        headers = dict(response.get("headers") or {})
        headers.update(cors_headers(request_origin(event)))
        response["headers"] = headers
        return response

    return wrapper


# api_gateway_base_path strips the stage name from paths
asgi_handler = Mangum(
    app, lifespan="off", api_gateway_base_path=settings.api_gateway_base_path
)


@with_cors
def lambda_handler(event: dict, context: object) -> dict:
    """
    AWS Lambda function handler.

    Invoked once per API Gateway request. The function is stateless; the
    FastAPI app and the adapter are built once per container at import
    time.

    Args:
        event: API Gateway proxy event
        context: Lambda context object with runtime information

    Returns:
        API Gateway response dict with statusCode, headers, and body
    """
    return asgi_handler(event, context)
