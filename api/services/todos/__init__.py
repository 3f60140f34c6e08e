"""Todos service modules."""

from .create_todo import create_todo
from .get_todos import get_todos, get_todo_by_id
from .update_todo import update_todo
from .delete_todo import delete_todo
from .errors import InvalidTodoError, TodoNotFoundError
from .models import Todo
from .store import TodoStore

__all__ = [
    "create_todo",
    "get_todos",
    "get_todo_by_id",
    "update_todo",
    "delete_todo",
    "InvalidTodoError",
    "TodoNotFoundError",
    "Todo",
    "TodoStore",
]
