"""todolist: a single-file command-line todo list."""

from todolist.config import VERSION

__version__ = VERSION
