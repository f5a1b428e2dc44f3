"""Command router: maps command words onto TaskList operations.

The router is the only place that knows about display positions.  ``done 3``
is resolved to the id of the third task in the current order before the
TaskList is touched.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.markup import escape

from todolist import log
from todolist.codec import Codec
from todolist.errors import InvalidArgument, TaskNotFoundError, UsageError
from todolist.tasks.model import Task, TaskList

COMMANDS: tuple[tuple[str, str], ...] = (
    ("add <words...>", "Add a new task"),
    ("done <N>", "Mark task N as done"),
    ("list", "Show all tasks"),
    ("list --not-done", "Show only tasks that are not done"),
    ("remove <N>", "Remove task N"),
    ("help", "Show this help"),
)


@dataclass
class CommandResult:
    """Outcome of one command.

    ``changed`` tells the caller whether ``task_list`` must be persisted.
    """

    message: str
    task_list: TaskList
    changed: bool = False


def resolve_position(task_list: TaskList, raw: str) -> str:
    """Return the id of the task shown at 1-based position *raw*."""
    try:
        position = int(raw)
    except ValueError:
        raise InvalidArgument(f"Task number must be a whole number, got {raw!r}") from None
    if position < 1 or position > len(task_list):
        raise TaskNotFoundError(position=position)
    return task_list.tasks[position - 1].id


def help_text() -> str:
    width = max(len(usage) for usage, _ in COMMANDS)
    lines = ["Usage: todo <command> [args]", "", "Commands:"]
    lines += [f"  {usage.ljust(width)}  {desc}" for usage, desc in COMMANDS]
    return "\n".join(lines) + "\n"


class Router:
    """Dispatch ``args`` (the command line split into words)."""

    def __init__(self, codec: Codec) -> None:
        self.codec = codec

    def run(self, task_list: TaskList, args: list[str]) -> CommandResult:
        if not args:
            raise UsageError("No command given. Run 'todo help' for usage.")

        command, rest = args[0].lower(), list(args[1:])
        log.debug(escape(f"Routing command: {command} {' '.join(rest)}".rstrip()))

        match command:
            case "add":
                return self._add(task_list, rest)
            case "done":
                return self._done(task_list, rest)
            case "list":
                return self._list(task_list, rest)
            case "remove":
                return self._remove(task_list, rest)
            case "help":
                _expect_args(command, rest, 0)
                return CommandResult(message=help_text(), task_list=task_list)
            case _:
                raise UsageError(f"Unknown command: {command}. Run 'todo help' for usage.")

    # ── handlers ─────────────────────────────────────────────────

    def _add(self, task_list: TaskList, words: list[str]) -> CommandResult:
        if not words:
            raise UsageError("Usage: todo add <words...>")
        task = Task.new(" ".join(words))
        return CommandResult(
            message=f"Added task: {task.description}",
            task_list=task_list.add(task),
            changed=True,
        )

    def _done(self, task_list: TaskList, rest: list[str]) -> CommandResult:
        _expect_args("done", rest, 1)
        tid = resolve_position(task_list, rest[0])
        return CommandResult(
            message=f"Marked task {int(rest[0])} as done",
            task_list=task_list.mark_done(tid),
            changed=True,
        )

    def _remove(self, task_list: TaskList, rest: list[str]) -> CommandResult:
        _expect_args("remove", rest, 1)
        tid = resolve_position(task_list, rest[0])
        return CommandResult(
            message=f"Removed task {int(rest[0])}",
            task_list=task_list.remove(tid),
            changed=True,
        )

    def _list(self, task_list: TaskList, rest: list[str]) -> CommandResult:
        if not rest:
            shown = task_list
        elif rest == ["--not-done"]:
            shown = task_list.not_done()
        else:
            raise UsageError("Usage: todo list [--not-done]")
        # The persisted list is the full one; the filter only affects display.
        return CommandResult(message=self.codec.format(shown), task_list=task_list)


def _expect_args(command: str, rest: list[str], count: int) -> None:
    if len(rest) != count:
        usage = next(u for u, _ in COMMANDS if u.split()[0] == command)
        raise UsageError(f"Usage: todo {usage}")
