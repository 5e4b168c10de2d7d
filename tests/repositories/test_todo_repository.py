"""Unit tests for TodoRepository."""

from unittest.mock import AsyncMock, patch

import pytest
from botocore.exceptions import ClientError

from src.exceptions import TodoNotFoundError
from src.repositories.todo_repository import TodoRepository


def client_error(code: str) -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": code}}, "Operation")


@pytest.fixture
def repository() -> TodoRepository:
    """Create TodoRepository instance."""
    return TodoRepository(table_name="todos-test")


def stored(todo_id: str, created_at: str, **fields) -> dict:
    return {
        "user_id": "user-1",
        "todo_id": todo_id,
        "created_at": created_at,
        "name": f"todo {todo_id}",
        "due_date": "2025-11-12",
        "done": False,
        **fields,
    }


def test_default_table_name():
    """Test that the table name comes from settings when not given."""
    with patch("src.repositories.todo_repository.settings") as mock_settings:
        mock_settings.dynamodb_table_todos = "todos-from-env"

        assert TodoRepository().table_name == "todos-from-env"


@pytest.mark.asyncio
async def test_create_drops_unset_optional_fields(repository, todo_item):
    """Test that None attributes are not written to DynamoDB."""
    with patch.object(repository, "put_item", new=AsyncMock()) as put_item:
        result = await repository.create(todo_item)

    assert result is todo_item
    item = put_item.call_args[0][0]
    assert "attachment_url" not in item
    assert item["user_id"] == "google-oauth2|user-1"
    assert item["todo_id"] == "123"


@pytest.mark.asyncio
async def test_list_for_user_sorted_by_creation(repository):
    """Test that items come back oldest first."""
    items = [
        stored("b", "2025-11-11T12:00:00Z"),
        stored("a", "2025-11-10T12:00:00Z"),
        stored("c", "2025-11-12T12:00:00Z"),
    ]

    with patch.object(repository, "query_all", new=AsyncMock(return_value=items)) as query_all:
        todos = await repository.list_for_user("user-1")

    assert [todo.todo_id for todo in todos] == ["a", "b", "c"]
    query_all.assert_awaited_once_with(
        KeyConditionExpression="user_id = :user_id",
        ExpressionAttributeValues={":user_id": "user-1"},
    )


@pytest.mark.asyncio
async def test_update_builds_expression_for_given_fields(repository):
    """Test that only the given fields are SET, through name placeholders."""
    updated = stored("a", "2025-11-10T12:00:00Z", name="buy milk", done=True)

    with patch.object(
        repository, "update_item", new=AsyncMock(return_value=updated)
    ) as update_item:
        todo = await repository.update("user-1", "a", {"name": "buy milk", "done": True})

    assert todo.name == "buy milk"
    assert todo.done is True

    args, kwargs = update_item.call_args
    assert args[0] == {"user_id": "user-1", "todo_id": "a"}
    assert args[1] == "SET #name = :name, #done = :done"
    assert args[2] == {":name": "buy milk", ":done": True}
    assert kwargs["expression_names"] == {"#name": "name", "#done": "done"}
    assert kwargs["condition_expression"] == "attribute_exists(todo_id)"


@pytest.mark.asyncio
async def test_update_missing_item(repository):
    """Test that a failed existence condition becomes TodoNotFoundError."""
    with patch.object(
        repository,
        "update_item",
        new=AsyncMock(side_effect=client_error("ConditionalCheckFailedException")),
    ):
        with pytest.raises(TodoNotFoundError) as exc_info:
            await repository.update("user-1", "missing", {"done": True})

    assert exc_info.value.details == {"todo_id": "missing"}


@pytest.mark.asyncio
async def test_update_other_client_error_propagates(repository):
    """Test that unrelated DynamoDB errors are not masked as 404."""
    with patch.object(
        repository,
        "update_item",
        new=AsyncMock(side_effect=client_error("ProvisionedThroughputExceededException")),
    ):
        with pytest.raises(ClientError):
            await repository.update("user-1", "a", {"done": True})


@pytest.mark.asyncio
async def test_delete(repository):
    """Test that delete is conditional on the item existing."""
    with patch.object(repository, "delete_item", new=AsyncMock()) as delete_item:
        await repository.delete("user-1", "a")

    delete_item.assert_awaited_once_with(
        {"user_id": "user-1", "todo_id": "a"},
        condition_expression="attribute_exists(todo_id)",
    )


@pytest.mark.asyncio
async def test_delete_missing_item(repository):
    """Test that deleting a missing item raises TodoNotFoundError."""
    with patch.object(
        repository,
        "delete_item",
        new=AsyncMock(side_effect=client_error("ConditionalCheckFailedException")),
    ):
        with pytest.raises(TodoNotFoundError):
            await repository.delete("user-1", "missing")
