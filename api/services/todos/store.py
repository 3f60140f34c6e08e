"""
Todo store - the in-memory collection behind the todo endpoints
"""
import logging
import threading
from typing import Any, Dict, List, Optional

from .errors import TodoNotFoundError
from .models import Todo

logger = logging.getLogger(__name__)

SEED_TODOS = [
    {"id": 1, "task": "Learn Node.js", "completed": False},
    {"id": 2, "task": "Build CRUD API", "completed": False},
]


class TodoStore:
    """
    Ordered collection of todos owned by one application instance.

    Todos are kept in insertion order. Every read and write happens under a
    single lock, and callers only ever receive copies of the stored records.
    """

    def __init__(self, todos: Optional[List[Dict[str, Any]]] = None):
        self._todos: List[Todo] = [Todo(**data) for data in (todos or [])]
        # Highest id ever handed out, including todos deleted since
        self._last_id = max((todo.id for todo in self._todos), default=0)
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "TodoStore":
        """Store holding the two starter todos"""
        return cls(SEED_TODOS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self, completed: Optional[bool] = None) -> List[Todo]:
        """All todos, or only those whose completed flag matches"""
        with self._lock:
            return [
                todo.model_copy()
                for todo in self._todos
                if completed is None or todo.completed == completed
            ]

    def get(self, todo_id: int) -> Todo:
        with self._lock:
            return self._find(todo_id).model_copy()

    def add(self, task: str, completed: bool = False) -> Todo:
        """Append a new todo with the next id and return it"""
        with self._lock:
            # Ids come from the max, never the count, and are not reused after deletes
            self._last_id += 1
            todo = Todo(id=self._last_id, task=task, completed=completed)
            self._todos.append(todo)
            logger.info(f"Created todo with ID {todo.id}")
            return todo.model_copy()

    def update(self, todo_id: int, changes: Dict[str, Any]) -> Todo:
        """Overwrite the given fields of a todo in place"""
        with self._lock:
            todo = self._find(todo_id)
            if "task" in changes:
                todo.task = changes["task"]
            if "completed" in changes:
                todo.completed = changes["completed"]
            logger.info(f"Updated todo {todo_id}")
            return todo.model_copy()

    def remove(self, todo_id: int) -> None:
        with self._lock:
            for idx, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    self._todos.pop(idx)
                    logger.info(f"Deleted todo {todo_id}")
                    return
        raise TodoNotFoundError(todo_id)

    def _find(self, todo_id: int) -> Todo:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise TodoNotFoundError(todo_id)
