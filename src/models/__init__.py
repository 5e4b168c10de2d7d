"""Data models for the Todo API."""

from src.models.todo import TodoItem

__all__ = ["TodoItem"]
