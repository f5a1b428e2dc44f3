"""Persistence of the serialized task list."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from rich.markup import escape

from todolist import log
from todolist.io_utils import PathLike, ensure_file, read_text, write_text


class Repository(ABC):
    """Abstract storage for the formatted list text."""

    @abstractmethod
    def read(self) -> str:
        """Return the stored text (empty string when nothing is stored)."""
        ...

    @abstractmethod
    def write(self, contents: str) -> None:
        """Replace the stored text with *contents*."""
        ...


class FileRepository(Repository):
    """Store the list in a single UTF-8 text file, overwritten on each save."""

    def __init__(self, path: PathLike) -> None:
        self.path = path if isinstance(path, Path) else Path(path)

    def read(self) -> str:
        if not self.path.exists():
            log.debug(escape(f"Creating empty todo file at {self.path}"))
        ensure_file(self.path)
        return read_text(self.path)

    def write(self, contents: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        write_text(self.path, contents)
        log.debug(escape(f"Wrote {len(contents.splitlines())} task(s) to {self.path}"))
