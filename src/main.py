"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from src.config import settings
from src.exceptions import TodoAPIError
from src.handlers.exception_handler import (
    generic_exception_handler,
    todo_api_exception_handler,
    validation_exception_handler,
)
from src.logging.config import configure_logging
from src.middleware.logging import LoggingMiddleware
from src.routes import todos

# Configure logging before creating the app
configure_logging()

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="""
## Todo API

CRUD operations on a personal todo list, served from AWS Lambda behind
API Gateway.

### Authentication

Every endpoint requires the JWT issued by the identity provider:

```
Authorization: Bearer YOUR_ID_TOKEN
```

The token is verified by the API Gateway authorizer before a handler runs;
handlers only read the caller's user id from it.

### Endpoints

1. **List**: GET /todos
2. **Create**: POST /todos
3. **Update**: PATCH /todos/{todoId} with the fields to change
4. **Delete**: DELETE /todos/{todoId}
""",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(LoggingMiddleware)

# Register exception handlers
app.add_exception_handler(TodoAPIError, todo_api_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(todos.router)
