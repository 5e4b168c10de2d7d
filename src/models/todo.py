"""Todo item model for DynamoDB."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TodoItem(BaseModel):
    """
    A single entry of a user's todo list.

    Attributes:
        user_id: Owner of the item (JWT subject), partition key
        todo_id: Unique identifier (UUID v4), sort key
        created_at: ISO 8601 timestamp of creation
        name: What needs doing
        due_date: Free-form due date supplied by the client
        done: Completion flag
        attachment_url: Optional link to an uploaded attachment
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "google-oauth2|115783759495544745774",
                "todo_id": "550e8400-e29b-41d4-a716-446655440000",
                "created_at": "2025-11-11T12:00:00Z",
                "name": "Buy milk",
                "due_date": "2025-11-12",
                "done": False,
                "attachment_url": None,
            }
        }
    )

    user_id: str = Field(..., description="Owner user id (JWT subject)")
    todo_id: str = Field(..., description="Unique todo identifier (UUID)")
    created_at: str = Field(..., description="ISO 8601 creation timestamp")
    name: str = Field(..., min_length=1, max_length=255, description="Todo name")
    due_date: str = Field(..., description="Due date")
    done: bool = Field(default=False, description="Completion status")
    attachment_url: Optional[str] = Field(None, description="Attachment URL")
