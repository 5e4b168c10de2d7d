"""Request logging middleware with correlation ID support."""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.logging.config import get_logger

logger = get_logger(__name__)


def _get_or_generate_correlation_id(request: Request) -> str:
    """Use the caller's X-Request-ID, or the API Gateway request id, or a new UUID."""
    if "X-Request-ID" in request.headers:
        return request.headers["X-Request-ID"]

    # Set by Mangum when the request came through API Gateway
    aws_event = request.scope.get("aws.event") or {}
    request_id = (aws_event.get("requestContext") or {}).get("requestId")
    return request_id or str(uuid.uuid4())


def _request_context(request: Request) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "todo_id": request.path_params.get("todoId"),
    }


def _log_request_start(request: Request, correlation_id: str) -> None:
    logger.info(
        "Request started",
        extra={
            "correlation_id": correlation_id,
            "context": {
                "method": request.method,
                "path": request.url.path,
                "client_host": request.client.host if request.client else None,
            },
        },
    )


def _log_request_error(
    request: Request, correlation_id: str, exc: Exception, elapsed_ms: float
) -> None:
    """
    Log a request that failed with an exception.

    Args:
        request: The incoming request
        correlation_id: The correlation ID for this request
        exc: The exception that was raised
        elapsed_ms: Time elapsed before the exception
    """
    logger.error(
        "Request failed with exception",
        exc_info=exc,
        extra={
            "correlation_id": correlation_id,
            "context": {
                **_request_context(request),
                "response_time_ms": round(elapsed_ms, 2),
            },
        },
    )


def _log_request_complete(
    request: Request, response: Response, correlation_id: str, elapsed_ms: float
) -> None:
    """
    Log the completion of a request.

    Args:
        request: The incoming request
        response: The response being returned
        correlation_id: The correlation ID for this request
        elapsed_ms: Time elapsed during request processing
    """
    logger.info(
        "Request completed",
        extra={
            "correlation_id": correlation_id,
            "context": {
                **_request_context(request),
                "status_code": response.status_code,
                "response_time_ms": round(elapsed_ms, 2),
            },
        },
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all HTTP requests and responses.

    Features:
    - Adds a correlation ID (X-Request-ID) to each request
    - Logs request start with method, path, and correlation ID
    - Logs response with status code, response time, and correlation ID
    - Never logs headers, so bearer tokens stay out of the logs
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request and add logging.

        Args:
            request: The incoming request
            call_next: The next middleware/handler in the chain

        Returns:
            The response from the handler
        """
        correlation_id = _get_or_generate_correlation_id(request)
        request.state.correlation_id = correlation_id

        start_time = time.time()
        _log_request_start(request, correlation_id)

        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed_ms = (time.time() - start_time) * 1000
            _log_request_error(request, correlation_id, exc, elapsed_ms)
            raise

        elapsed_ms = (time.time() - start_time) * 1000
        _log_request_complete(request, response, correlation_id, elapsed_ms)

        response.headers["X-Request-ID"] = correlation_id

        return response
