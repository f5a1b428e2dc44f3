"""Codecs that turn a TaskList into text and back."""

from __future__ import annotations

from abc import ABC, abstractmethod

from todolist.errors import CodecError, InvalidArgument
from todolist.tasks.model import DONE_MARK, Task, TaskList


class Codec(ABC):
    """Abstract codec.  The same text serves display and storage."""

    @abstractmethod
    def format(self, task_list: TaskList) -> str:
        """Render *task_list* as text."""
        ...

    @abstractmethod
    def parse(self, text: str) -> TaskList:
        """Rebuild a :class:`TaskList` from text produced by :meth:`format`."""
        ...


class TextCodec(Codec):
    """Numbered, line-oriented format::

        1. buy milk
        2. pay rent ✓

    The number is the display position, recomputed on every format; it is
    never read back as an identity.
    """

    def format(self, task_list: TaskList) -> str:
        return "".join(
            f"{pos}. {self.format_task(task)}\n"
            for pos, task in enumerate(task_list.tasks, start=1)
        )

    def format_task(self, task: Task) -> str:
        if task.is_done:
            return f"{task.description} {DONE_MARK}"
        return task.description

    def parse(self, text: str) -> TaskList:
        tasks: list[Task] = []
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            tasks.append(self.parse_line(line, line_no))
        return TaskList.of(tasks)

    def parse_line(self, line: str, line_no: int = 1) -> Task:
        words = line.split()[1:]
        is_done = bool(words) and words[-1] == DONE_MARK
        if is_done:
            words = words[:-1]
        if not words:
            raise CodecError(line_no, line)
        try:
            return Task.new(" ".join(words), is_done=is_done)
        except InvalidArgument:
            raise CodecError(line_no, line) from None
