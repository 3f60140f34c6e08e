"""
Todos router - HTTP endpoints for the todo list
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, StrictStr, field_validator
from api.services.todos import (
    create_todo,
    get_todos,
    get_todo_by_id,
    update_todo,
    delete_todo,
    InvalidTodoError,
    Todo,
    TodoNotFoundError,
    TodoStore,
)
from api.services.todos.errors import CREATE_TASK_INVALID, UPDATE_TASK_INVALID
from api.dependencies import get_todo_store
import logging
import re

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/todos", tags=["todos"])

NOT_FOUND_MESSAGE = "Todo not found"
TODO_ID_PATTERN = re.compile(r"[0-9]+")


# Pydantic models for request validation
class CreateTodoRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    task: StrictStr
    # Anything other than a JSON true leaves the todo open
    completed: Any = False

    @field_validator("task")
    @classmethod
    def task_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(CREATE_TASK_INVALID)
        return value


class UpdateTodoRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    task: Optional[StrictStr] = None
    completed: Any = None

    @field_validator("task")
    @classmethod
    def task_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            raise ValueError(UPDATE_TASK_INVALID)
        return value


def _parse_todo_id(todo_id: str) -> int:
    # Only plain ASCII digits name a todo; anything else can never match one
    if not TODO_ID_PATTERN.fullmatch(todo_id):
        raise TodoNotFoundError(todo_id)
    return int(todo_id)


# List endpoints. The literal paths must stay above "/{todo_id}".
@router.get("", response_model=List[Todo])
async def get_todos_endpoint(store: TodoStore = Depends(get_todo_store)):
    """Get every todo in creation order."""
    todos = get_todos(store)
    logger.info(f"📋 Fetched {len(todos)} todos")
    return todos


@router.get("/active", response_model=List[Todo])
async def get_active_todos_endpoint(store: TodoStore = Depends(get_todo_store)):
    """Get the todos that are not completed yet."""
    todos = get_todos(store, completed=False)
    logger.info(f"📋 Fetched {len(todos)} active todos")
    return todos


@router.get("/completed", response_model=List[Todo])
async def get_completed_todos_endpoint(store: TodoStore = Depends(get_todo_store)):
    """Get the todos that are done."""
    todos = get_todos(store, completed=True)
    logger.info(f"📋 Fetched {len(todos)} completed todos")
    return todos


@router.get("/{todo_id}", response_model=Todo)
async def get_todo_endpoint(todo_id: str, store: TodoStore = Depends(get_todo_store)):
    """Get a single todo by ID."""
    try:
        return get_todo_by_id(store, _parse_todo_id(todo_id))
    except TodoNotFoundError as e:
        logger.warning(f"❌ {e}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": NOT_FOUND_MESSAGE},
        )


# Create todo endpoint
@router.post("", response_model=Todo, status_code=status.HTTP_201_CREATED)
async def create_todo_endpoint(
    request: CreateTodoRequest,
    store: TodoStore = Depends(get_todo_store),
):
    """
    Create a new todo.
    Body: {"task": str, "completed": bool (optional)}
    """
    try:
        logger.info(f"➕ Creating todo: {request.task}")
        todo = create_todo(store, request.task, request.completed)
        logger.info(f"✅ Created todo {todo.id}")
        return todo
    except InvalidTodoError as e:
        logger.warning(f"❌ Rejected todo: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )


# Update todo endpoint
@router.patch("/{todo_id}", response_model=Todo)
async def update_todo_endpoint(
    todo_id: str,
    request: Optional[UpdateTodoRequest] = None,
    store: TodoStore = Depends(get_todo_store),
):
    """
    Partially update a todo.
    Only the fields sent in the body are changed.
    """
    fields = request.model_dump(exclude_unset=True) if request else {}
    try:
        logger.info(f"✏️ Updating todo {todo_id}: {sorted(fields)}")
        todo = update_todo(store, _parse_todo_id(todo_id), fields)
        logger.info(f"✅ Updated todo {todo.id}")
        return todo
    except TodoNotFoundError as e:
        logger.warning(f"❌ {e}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": NOT_FOUND_MESSAGE},
        )
    except InvalidTodoError as e:
        logger.warning(f"❌ Rejected update for todo {todo_id}: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )


# Delete todo endpoint
@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo_endpoint(todo_id: str, store: TodoStore = Depends(get_todo_store)):
    """Delete a todo."""
    try:
        logger.info(f"🗑️ Deleting todo {todo_id}")
        delete_todo(store, _parse_todo_id(todo_id))
        logger.info(f"✅ Deleted todo {todo_id}")
        return None
    except TodoNotFoundError as e:
        logger.warning(f"❌ {e}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": NOT_FOUND_MESSAGE},
        )
