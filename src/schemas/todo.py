"""Pydantic schemas for todo API requests and responses."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.models.todo import TodoItem


class CreateTodoRequest(BaseModel):
    """Request body for creating a todo."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"name": "Buy milk", "due_date": "2025-11-12"}},
    )

    name: str = Field(..., min_length=1, max_length=255, description="Todo name")
    due_date: str = Field(..., min_length=1, description="Due date")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class UpdateTodoRequest(BaseModel):
    """
    Request body for updating a todo.

    Every field is optional; only the ones present in the request body are
    applied (see ``changes``).
    """

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"name": "Buy milk", "done": True}},
    )

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    due_date: Optional[str] = Field(None, min_length=1)
    done: Optional[bool] = None

    @field_validator("name", "due_date", "done")
    @classmethod
    def not_null(cls, v, info):
        """Reject explicit nulls; a field is either omitted or given a value."""
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        return v

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    def changes(self) -> dict:
        """Return only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class TodoResponse(BaseModel):
    """Response body for a created todo."""

    item: TodoItem


class TodoListResponse(BaseModel):
    """Response body for listing the caller's todos."""

    items: List[TodoItem]
