"""
FastAPI dependencies shared by the routers
"""
from fastapi import Request

from api.services.todos import TodoStore


def get_todo_store(request: Request) -> TodoStore:
    """
    Return the todo store owned by the running application.

    The store is created once in ``create_app`` and kept on ``app.state``,
    so every request sees the same collection.
    """
    return request.app.state.todo_store
