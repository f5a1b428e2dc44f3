"""Typed errors raised by the task list core and its collaborators."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for every error the todo core raises."""


class InvalidArgument(TodoError, ValueError):
    """Malformed input, e.g. an empty description or a non-numeric position."""


class DuplicateTaskError(TodoError):
    def __init__(self, task_id: str, description: str = "") -> None:
        self.task_id = task_id
        self.description = description
        label = f'"{description}"' if description else task_id
        super().__init__(f"Task already exists: {label}")


class TaskNotFoundError(TodoError, LookupError):
    def __init__(self, task_id: str = "", *, position: int | None = None) -> None:
        self.task_id = task_id
        self.position = position
        if position is not None:
            msg = f"Task {position} not found"
        else:
            msg = f"Task not found: {task_id}"
        super().__init__(msg)


class AlreadyDoneError(TodoError):
    def __init__(self, task_id: str, description: str = "") -> None:
        self.task_id = task_id
        self.description = description
        label = f'"{description}"' if description else task_id
        super().__init__(f"Task is already done: {label}")


class CodecError(TodoError):
    """Stored text that cannot be turned back into tasks."""

    def __init__(self, line_no: int, line: str) -> None:
        self.line_no = line_no
        self.line = line
        super().__init__(f"Cannot parse line {line_no}: {line!r}")


class UsageError(TodoError):
    """A command line the router does not understand."""
