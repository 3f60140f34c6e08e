"""Get todos service."""

from typing import List, Optional

from .models import Todo
from .store import TodoStore


def get_todos(store: TodoStore, completed: Optional[bool] = None) -> List[Todo]:
    """
    Get todos in the order they were created.

    Args:
        store: The todo store to read from
        completed: Optional completion status to filter by

    Returns:
        List of todos
    """
    return store.list(completed=completed)


def get_todo_by_id(store: TodoStore, todo_id: int) -> Todo:
    """
    Get a specific todo by ID.

    Raises:
        TodoNotFoundError: If no todo has this ID
    """
    return store.get(todo_id)
