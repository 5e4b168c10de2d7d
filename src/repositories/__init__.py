"""Repository layer for DynamoDB operations."""

from src.repositories.todo_repository import TodoRepository

__all__ = ["TodoRepository"]
