"""Shared pytest fixtures."""

from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest

from src.logging.config import get_handler_logger
from src.main import app
from src.models.todo import TodoItem


@pytest.fixture
def make_token():
    """Return a factory for unsigned-verification JWTs with the given subject."""

    def _make_token(sub: str | None = "google-oauth2|user-1") -> str:
        claims = {"iss": "https://test.auth0.com/"}
        if sub is not None:
            claims["sub"] = sub
        return jwt.encode(claims, "test-secret", algorithm="HS256")

    return _make_token


@pytest.fixture
def todo_item() -> TodoItem:
    """A stored todo owned by the default test user."""
    return TodoItem(
        user_id="google-oauth2|user-1",
        todo_id="123",
        created_at="2025-11-11T12:00:00Z",
        name="buy milk",
        due_date="2025-11-12",
        done=False,
    )


@pytest.fixture
def mock_service(todo_item: TodoItem) -> MagicMock:
    """TodoService double with every delegated call stubbed."""
    service = MagicMock()
    service.create_todo = AsyncMock(return_value=todo_item)
    service.get_todos = AsyncMock(return_value=[todo_item])
    service.update_todo = AsyncMock(return_value=todo_item)
    service.delete_todo = AsyncMock(return_value=None)
    return service


@pytest.fixture
def handler_logger():
    """Inject a mock logger into the todo handlers."""
    logger = MagicMock()
    app.dependency_overrides[get_handler_logger] = lambda: logger
    yield logger
    app.dependency_overrides.clear()
