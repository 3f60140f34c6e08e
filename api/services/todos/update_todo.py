"""Update todo service."""

from typing import Any, Dict

from .create_todo import is_valid_task
from .errors import UPDATE_TASK_INVALID, InvalidTodoError
from .models import Todo
from .store import TodoStore


def update_todo(store: TodoStore, todo_id: int, fields: Dict[str, Any]) -> Todo:
    """
    Partially update a todo.

    Only the keys present in ``fields`` are applied; anything else on the
    todo is left as it was.

    Args:
        store: The todo store holding the todo
        todo_id: The ID of the todo to update
        fields: Any of ``task`` and ``completed``

    Returns:
        The updated todo

    Raises:
        InvalidTodoError: If a task is given that is not a non-empty string
        TodoNotFoundError: If no todo has this ID
    """
    changes: Dict[str, Any] = {}

    if "task" in fields:
        if not is_valid_task(fields["task"]):
            raise InvalidTodoError(UPDATE_TASK_INVALID)
        changes["task"] = fields["task"]

    if "completed" in fields:
        changes["completed"] = bool(fields["completed"])

    return store.update(todo_id, changes)
