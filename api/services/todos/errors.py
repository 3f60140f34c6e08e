"""Errors raised by the todo services."""

CREATE_TASK_INVALID = "Task field is required and must be a non-empty string"
UPDATE_TASK_INVALID = "Task field must be a non-empty string"


class TodoNotFoundError(Exception):
    """No todo with the requested id exists."""

    def __init__(self, todo_id):
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class InvalidTodoError(ValueError):
    """The submitted todo fields are malformed."""
