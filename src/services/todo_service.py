"""Todo service layer with the business logic behind each handler."""

import uuid
from datetime import UTC, datetime
from typing import Any

from src.auth.token import parse_user_id
from src.exceptions import BadRequestError
from src.logging.config import get_logger
from src.models.todo import TodoItem
from src.repositories.todo_repository import TodoRepository
from src.schemas.todo import CreateTodoRequest

logger = get_logger(__name__)


def utc_timestamp() -> str:
    """Return the current UTC time as ISO 8601 with a Z suffix."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class TodoService:
    """
    Service layer for todo operations.

    Every operation takes the caller's bearer token, resolves the user id
    from it and only ever touches that user's items.
    """

    def __init__(self, repository: TodoRepository | None = None) -> None:
        """
        Initialize TodoService.

        Args:
            repository: TodoRepository instance (creates new if None)
        """
        self.repository = repository or TodoRepository()

    async def create_todo(self, token: str, request: CreateTodoRequest) -> TodoItem:
        """
        Create a todo for the caller.

        Args:
            token: Bearer token of the caller
            request: Validated create request

        Returns:
            The stored TodoItem

        Raises:
            UnauthorizedError: If the token carries no usable subject
        """
        user_id = parse_user_id(token)
        todo = TodoItem(
            user_id=user_id,
            todo_id=str(uuid.uuid4()),
            created_at=utc_timestamp(),
            name=request.name,
            due_date=request.due_date,
            done=False,
        )
        await self.repository.create(todo)
        logger.debug(
            "Todo created",
            extra={"context": {"user_id": user_id, "todo_id": todo.todo_id}},
        )
        return todo

    async def get_todos(self, token: str) -> list[TodoItem]:
        """List the caller's todos, oldest first."""
        user_id = parse_user_id(token)
        return await self.repository.list_for_user(user_id)

    async def update_todo(
        self, token: str, todo_id: str, payload: dict[str, Any]
    ) -> TodoItem:
        """
        Apply the given fields to one of the caller's todos.

        Args:
            token: Bearer token of the caller
            todo_id: Todo to update
            payload: Fields to change, as sent by the client

        Returns:
            The updated TodoItem

        Raises:
            BadRequestError: If payload is empty
            UnauthorizedError: If the token carries no usable subject
            TodoNotFoundError: If the caller has no such todo
        """
        if not payload:
            raise BadRequestError(
                message="Update must change at least one field",
                details={"fields": ["name", "due_date", "done"]},
            )

        user_id = parse_user_id(token)
        return await self.repository.update(user_id, todo_id, payload)

    async def delete_todo(self, token: str, todo_id: str) -> None:
        """
        Delete one of the caller's todos.

        Raises:
            UnauthorizedError: If the token carries no usable subject
            TodoNotFoundError: If the caller has no such todo
        """
        user_id = parse_user_id(token)
        await self.repository.delete(user_id, todo_id)
