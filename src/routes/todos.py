"""API routes for todo operations.

Each handler pulls the bearer token and the ``todoId`` path parameter out of
the request, makes exactly one call into TodoService and returns a
fixed-shape response. Malformed headers or bodies are rejected by the
dependencies before the service is reached.
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse

from src.auth.dependencies import require_bearer_token
from src.logging.config import get_handler_logger
from src.schemas.todo import (
    CreateTodoRequest,
    TodoListResponse,
    TodoResponse,
    UpdateTodoRequest,
)
from src.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["Todos"])

DELETED_MESSAGE = "Sucessfully deleted!"
UPDATED_MESSAGE = "Sucessfully updated!"

_ERROR_RESPONSES = {
    400: {"description": "Validation error or malformed JSON body"},
    401: {
        "description": "Unauthorized - Missing or malformed bearer token",
        "content": {
            "application/json": {
                "example": {
                    "status": "error",
                    "error_code": "UNAUTHORIZED",
                    "message": "Missing Authorization header",
                    "details": {},
                }
            }
        },
    },
    500: {"description": "Internal server error"},
}

_NOT_FOUND_RESPONSE = {
    404: {
        "description": "Todo not found",
        "content": {
            "application/json": {
                "example": {
                    "status": "error",
                    "error_code": "NOT_FOUND",
                    "message": "Todo 123 not found",
                    "details": {"todo_id": "123"},
                }
            }
        },
    },
}


@router.get(
    "",
    response_model=TodoListResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
async def get_todos(
    token: str = Depends(require_bearer_token),
    logger: logging.Logger = Depends(get_handler_logger),
) -> TodoListResponse:
    """
    List the caller's todos, oldest first.

    Raises:
        UnauthorizedError: If the bearer token is missing or unusable (401)
    """
    service = TodoService()
    items = await service.get_todos(token)

    logger.info(
        f"Listed {len(items)} todo items",
        extra={"context": {"operation": "get_todos", "count": len(items)}},
    )
    return TodoListResponse(items=items)


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_todo(
    todo_request: CreateTodoRequest,
    token: str = Depends(require_bearer_token),
    logger: logging.Logger = Depends(get_handler_logger),
) -> TodoResponse:
    """
    Create a todo for the caller.

    Returns:
        TodoResponse wrapping the stored item

    Raises:
        UnauthorizedError: If the bearer token is missing or unusable (401)
    """
    service = TodoService()
    item = await service.create_todo(token, todo_request)

    logger.info(
        f"Successfully created todo item {item.todo_id}",
        extra={"context": {"operation": "create_todo", "todo_id": item.todo_id}},
    )
    return TodoResponse(item=item)


@router.patch(
    "/{todoId}",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Todo updated",
            "content": {"text/plain": {"example": UPDATED_MESSAGE}},
        },
        **_ERROR_RESPONSES,
        **_NOT_FOUND_RESPONSE,
    },
)
async def update_todo(
    update_request: UpdateTodoRequest,
    todo_id: str = Path(..., alias="todoId", description="Todo identifier"),
    token: str = Depends(require_bearer_token),
    logger: logging.Logger = Depends(get_handler_logger),
) -> PlainTextResponse:
    """
    Update a todo with the fields present in the request body.

    Only the fields the client actually sent are forwarded, so
    ``{"done": true}`` leaves name and due_date untouched.

    Raises:
        UnauthorizedError: If the bearer token is missing or unusable (401)
        BadRequestError: If the body changes no field (400)
        TodoNotFoundError: If the caller has no such todo (404)
    """
    service = TodoService()
    await service.update_todo(token, todo_id, update_request.changes())

    logger.info(
        f"Successfully updated todo item {todo_id}",
        extra={"context": {"operation": "update_todo", "todo_id": todo_id}},
    )
    return PlainTextResponse(UPDATED_MESSAGE, status_code=status.HTTP_200_OK)


@router.delete(
    "/{todoId}",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Todo deleted",
            "content": {"text/plain": {"example": DELETED_MESSAGE}},
        },
        401: _ERROR_RESPONSES[401],
        **_NOT_FOUND_RESPONSE,
    },
)
async def delete_todo(
    todo_id: str = Path(..., alias="todoId", description="Todo identifier"),
    token: str = Depends(require_bearer_token),
    logger: logging.Logger = Depends(get_handler_logger),
) -> PlainTextResponse:
    """
    Delete one of the caller's todos.

    Raises:
        UnauthorizedError: If the bearer token is missing or unusable (401)
        TodoNotFoundError: If the caller has no such todo (404)
    """
    service = TodoService()
    await service.delete_todo(token, todo_id)

    logger.info(
        f"Successfully deleted todo item {todo_id}",
        extra={"context": {"operation": "delete_todo", "todo_id": todo_id}},
    )
    return PlainTextResponse(DELETED_MESSAGE, status_code=status.HTTP_200_OK)
