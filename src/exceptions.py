"""Custom exception classes for the Todo API."""

from typing import Any


class TodoAPIError(Exception):
    """Base exception for the Todo API."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class BadRequestError(TodoAPIError):
    """Raised when the request is well-formed JSON but not acceptable (400)."""

    def __init__(
        self,
        message: str = "Bad request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST",
            details=details,
        )


class UnauthorizedError(TodoAPIError):
    """Raised when the bearer token is missing or unusable (401)."""

    def __init__(
        self,
        message: str = "Unauthorized: Invalid or missing bearer token",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize UnauthorizedError.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=401,
            error_code="UNAUTHORIZED",
            details=details,
        )


class TodoNotFoundError(TodoAPIError):
    """Raised when the caller has no todo with the given id (404)."""

    def __init__(
        self,
        message: str = "Todo not found",
        todo_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize TodoNotFoundError.

        Args:
            message: Error message
            todo_id: Todo ID that was not found
            details: Additional error details
        """
        error_details = details or {}
        if todo_id:
            error_details["todo_id"] = todo_id
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=error_details,
        )
