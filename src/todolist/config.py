"""Configuration defaults, env vars, and runtime options for todolist."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


VERSION = "1.0.0"

DEFAULT_TODO_FILE = "todo.txt"


@dataclass
class Config:
    """Runtime configuration: where the list lives and how chatty we are."""

    # Storage
    todo_folder: str = ""
    todo_file: str = ""

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.todo_folder:
            self.todo_folder = os.environ.get("TODO_DIR") or str(Path.home())
        if not self.todo_file:
            self.todo_file = os.environ.get("TODO_FILE") or DEFAULT_TODO_FILE

    @property
    def todo_path(self) -> Path:
        return Path(self.todo_folder).expanduser() / self.todo_file

    @classmethod
    def from_path(cls, path: str | Path, *, verbose: bool = False) -> Config:
        """Build a config pointing at an explicit file path."""
        p = Path(path).expanduser()
        return cls(todo_folder=str(p.parent), todo_file=p.name, verbose=verbose)
