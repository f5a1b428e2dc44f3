"""Shared fixtures for todolist tests.

File handling in tests:
- Use tmp_path for any directory or file creation so tests are isolated and cleaned up.
- Use todolist.io_utils read_text/write_text for consistent UTF-8 I/O.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from todolist import log
from todolist.codec import TextCodec
from todolist.tasks.model import Task, TaskList

from .fakes import InMemoryRepository


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep tests away from the real ~/todo.txt and reset verbosity."""
    monkeypatch.setenv("TODO_DIR", str(tmp_path / "home"))
    monkeypatch.delenv("TODO_FILE", raising=False)
    yield
    log.set_verbose(False)


def _make_task(description: str, is_done: bool = False) -> Task:
    return Task.new(description, is_done=is_done)


def _make_task_list(*descriptions: str, done: tuple[str, ...] = ()) -> TaskList:
    return TaskList.of(_make_task(d, is_done=d in done) for d in descriptions)


@pytest.fixture
def make_task():
    """Factory fixture that creates Task instances."""
    return _make_task


@pytest.fixture
def make_task_list():
    """Factory fixture that creates TaskList instances from descriptions."""
    return _make_task_list


@pytest.fixture
def codec() -> TextCodec:
    return TextCodec()


@pytest.fixture
def memory_repo() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def todo_path(tmp_path: Path) -> Path:
    """Path of a not-yet-existing todo file inside tmp_path."""
    return tmp_path / "todo.txt"
