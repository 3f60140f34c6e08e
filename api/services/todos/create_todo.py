"""Create todo service."""

from typing import Any

from .errors import CREATE_TASK_INVALID, InvalidTodoError
from .models import Todo
from .store import TodoStore


def is_valid_task(task: Any) -> bool:
    """A task description must be a string with something besides whitespace"""
    return isinstance(task, str) and task.strip() != ""


def create_todo(store: TodoStore, task: Any, completed: Any = False) -> Todo:
    """
    Create a new todo.

    Args:
        store: The todo store to add to
        task: The task description
        completed: Marks the todo done only when it is exactly ``True``

    Returns:
        The created todo

    Raises:
        InvalidTodoError: If task is missing, not a string, or blank
    """
    if not is_valid_task(task):
        raise InvalidTodoError(CREATE_TASK_INVALID)

    return store.add(task, completed=completed is True)
