"""Todo repository for DynamoDB operations."""

from typing import Any, Dict, List

from botocore.exceptions import ClientError

from src.config import settings
from src.exceptions import TodoNotFoundError
from src.models.todo import TodoItem
from src.repositories.base import BaseRepository, is_conditional_check_failure

# Only the caller's own existing item may be changed; without this
# update_item would upsert and delete_item would silently succeed.
_ITEM_EXISTS = "attribute_exists(todo_id)"


class TodoRepository(BaseRepository):
    """
    Repository for TodoItem operations in DynamoDB.

    Items live in a single table keyed by (user_id, todo_id).
    """

    def __init__(self, table_name: str | None = None) -> None:
        """Initialize TodoRepository with the todos table."""
        super().__init__(table_name or settings.dynamodb_table_todos)

    @staticmethod
    def _key(user_id: str, todo_id: str) -> Dict[str, str]:
        return {"user_id": user_id, "todo_id": todo_id}

    async def create(self, todo: TodoItem) -> TodoItem:
        """
        Store a new todo item.

        Args:
            todo: TodoItem to store

        Returns:
            The stored TodoItem
        """
        # DynamoDB rejects None attribute values
        await self.put_item(todo.model_dump(exclude_none=True))
        return todo

    async def list_for_user(self, user_id: str) -> List[TodoItem]:
        """
        List every todo the user owns, oldest first.

        Args:
            user_id: Owner (partition key)

        Returns:
            List of TodoItem sorted by created_at
        """
        items = await self.query_all(
            KeyConditionExpression="user_id = :user_id",
            ExpressionAttributeValues={":user_id": user_id},
        )
        todos = [TodoItem(**item) for item in items]
        todos.sort(key=lambda todo: todo.created_at)
        return todos

    async def update(
        self, user_id: str, todo_id: str, changes: Dict[str, Any]
    ) -> TodoItem:
        """
        Apply a partial update to one of the user's todos.

        Args:
            user_id: Owner (partition key)
            todo_id: Todo id (sort key)
            changes: Attribute name to new value, must not be empty

        Returns:
            The updated TodoItem

        Raises:
            TodoNotFoundError: If the user has no such todo
        """
        # name is a DynamoDB reserved word, so every attribute goes through
        # a placeholder
        names = {f"#{field}": field for field in changes}
        values = {f":{field}": value for field, value in changes.items()}
        update_expr = "SET " + ", ".join(f"#{field} = :{field}" for field in changes)

        try:
            attributes = await self.update_item(
                self._key(user_id, todo_id),
                update_expr,
                values,
                expression_names=names,
                condition_expression=_ITEM_EXISTS,
            )
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise TodoNotFoundError(
                    message=f"Todo {todo_id} not found", todo_id=todo_id
                ) from exc
            raise

        return TodoItem(**attributes)

    async def delete(self, user_id: str, todo_id: str) -> None:
        """
        Delete one of the user's todos.

        Raises:
            TodoNotFoundError: If the user has no such todo
        """
        try:
            await self.delete_item(
                self._key(user_id, todo_id), condition_expression=_ITEM_EXISTS
            )
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise TodoNotFoundError(
                    message=f"Todo {todo_id} not found", todo_id=todo_id
                ) from exc
            raise
