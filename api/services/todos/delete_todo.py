"""Delete todo service."""

from .store import TodoStore


def delete_todo(store: TodoStore, todo_id: int) -> None:
    """
    Delete a todo permanently.

    Raises:
        TodoNotFoundError: If no todo has this ID
    """
    store.remove(todo_id)
