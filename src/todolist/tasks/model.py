"""Task and TaskList value types.

Both are immutable: every operation on a :class:`TaskList` returns a new list
and leaves the receiver untouched.  Positions never appear here; callers
resolve a 1-based position to a task id before calling in.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from todolist.errors import (
    AlreadyDoneError,
    DuplicateTaskError,
    InvalidArgument,
    TaskNotFoundError,
)

DONE_MARK = "✓"


def task_id(description: str) -> str:
    """Return the content-derived id for *description* (hex SHA-256)."""
    return hashlib.sha256(description.encode("utf-8")).hexdigest()


def has_line_break(text: str) -> bool:
    """True when *text* would span more than one stored line."""
    return bool(text) and text.splitlines() != [text]


@dataclass(frozen=True)
class Task:
    id: str
    description: str
    is_done: bool = False

    @classmethod
    def new(cls, description: str, is_done: bool = False) -> Task:
        """Build a task, deriving its id from *description*.

        Runs of whitespace collapse to single spaces and the ends are trimmed
        before hashing, so the description reads back unchanged from storage.

        Raises :class:`InvalidArgument` for empty descriptions, descriptions
        containing a line break (the storage record separator), and
        descriptions whose last word is the done mark.
        """
        if not isinstance(description, str):
            raise InvalidArgument(f"Description must be a string, got {type(description).__name__}")
        if has_line_break(description):
            raise InvalidArgument("Task description cannot contain line breaks")
        description = " ".join(description.split())
        if not description:
            raise InvalidArgument("Task description cannot be empty")
        if description.split()[-1] == DONE_MARK:
            raise InvalidArgument(f"Task description cannot end with \"{DONE_MARK}\"")
        return cls(id=task_id(description), description=description, is_done=is_done)

    def complete(self) -> Task:
        return replace(self, is_done=True)


@dataclass(frozen=True)
class TaskList:
    tasks: tuple[Task, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable (e.g. a list read from storage) but store a tuple.
        tasks = tuple(self.tasks)
        seen: set[str] = set()
        for task in tasks:
            if task.id in seen:
                raise DuplicateTaskError(task.id, task.description)
            seen.add(task.id)
        object.__setattr__(self, "tasks", tasks)

    @classmethod
    def of(cls, tasks: Iterable[Task]) -> TaskList:
        return cls(tasks=tuple(tasks))

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # ── queries ──────────────────────────────────────────────────

    def ids(self) -> list[str]:
        return [t.id for t in self.tasks]

    def get_task(self, task_id: str) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None

    def not_done(self) -> TaskList:
        """Return only the tasks that are still open, in the same order."""
        return TaskList(tasks=tuple(t for t in self.tasks if not t.is_done))

    # ── operations ───────────────────────────────────────────────

    def add(self, task: Task) -> TaskList:
        if self.get_task(task.id) is not None:
            raise DuplicateTaskError(task.id, task.description)
        return TaskList(tasks=self.tasks + (task,))

    def mark_done(self, task_id: str) -> TaskList:
        """Complete the task with *task_id* in place.

        Re-completing a done task is rejected with :class:`AlreadyDoneError`
        rather than treated as a no-op.
        """
        task = self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if task.is_done:
            raise AlreadyDoneError(task_id, task.description)
        completed = task.complete()
        return TaskList(tasks=tuple(completed if t.id == task_id else t for t in self.tasks))

    def remove(self, task_id: str) -> TaskList:
        if self.get_task(task_id) is None:
            raise TaskNotFoundError(task_id)
        return TaskList(tasks=tuple(t for t in self.tasks if t.id != task_id))
