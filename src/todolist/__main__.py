"""Allow ``python -m todolist``."""

from todolist.cli import main

main()
