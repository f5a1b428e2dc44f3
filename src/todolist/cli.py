"""todolist CLI.

Installed as the ``todo`` console_script.  This module is the only place that
wires a concrete Repository and Codec to the Router.
"""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from todolist import __version__
from todolist import log as glog
from todolist.codec import Codec, TextCodec
from todolist.config import Config
from todolist.errors import TodoError
from todolist.router import CommandResult, Router, help_text
from todolist.storage import FileRepository, Repository


CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Lets ``todo done -1`` reach the router instead of failing as an unknown option.
POSITION_SETTINGS = dict(ignore_unknown_options=True)


def execute(repo: Repository, codec: Codec, args: list[str]) -> CommandResult:
    """Load the list, run one command, and persist the result if it changed."""
    task_list = codec.parse(repo.read())
    glog.debug(f"Loaded {len(task_list)} task(s)")

    result = Router(codec).run(task_list, args)

    if result.changed:
        repo.write(codec.format(result.task_list))
    return result


def _dispatch(ctx: click.Context, args: list[str]) -> CommandResult:
    cfg: Config = ctx.obj
    repo = FileRepository(cfg.todo_path)
    glog.debug(escape(f"Todo file: {cfg.todo_path}"))

    try:
        return execute(repo, TextCodec(), args)
    except TodoError as exc:
        glog.error(escape(str(exc)))
        sys.exit(1)
    except OSError as exc:
        glog.error(escape(f"Cannot access {cfg.todo_path}: {exc.strerror or exc}"))
        sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-f",
    "--file",
    "todo_file",
    default="",
    help="Todo file path (default: ~/todo.txt)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="todo")
@click.pass_context
def main(ctx: click.Context, todo_file: str, verbose: bool) -> None:
    """todo: a tiny todo list kept in a plain text file.

    \b
    EXAMPLES:
      todo add buy milk          # Add a task
      todo list                  # Show all tasks
      todo list --not-done       # Show open tasks only
      todo done 1                # Mark task 1 as done
      todo remove 1              # Remove task 1
    """
    glog.set_verbose(verbose)

    if todo_file:
        ctx.obj = Config.from_path(todo_file, verbose=verbose)
    else:
        ctx.obj = Config(verbose=verbose)


# ── Subcommands ──────────────────────────────────────────────────


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Add a task (all words form the description)."""
    result = _dispatch(ctx, ["add", *words])
    glog.success(escape(result.message))


@main.command(context_settings=POSITION_SETTINGS)
@click.argument("n")
@click.pass_context
def done(ctx: click.Context, n: str) -> None:
    """Mark task N as done."""
    result = _dispatch(ctx, ["done", n])
    glog.success(escape(result.message))


@main.command(name="list")
@click.option("--not-done", is_flag=True, help="Only show tasks that are not done")
@click.pass_context
def list_tasks(ctx: click.Context, not_done: bool) -> None:
    """Show tasks."""
    args = ["list", "--not-done"] if not_done else ["list"]
    result = _dispatch(ctx, args)
    if not result.message:
        glog.info("No open tasks." if not_done else "No tasks.")
        return
    glog.out(result.message)


@main.command(context_settings=POSITION_SETTINGS)
@click.argument("n")
@click.pass_context
def remove(ctx: click.Context, n: str) -> None:
    """Remove task N."""
    result = _dispatch(ctx, ["remove", n])
    glog.success(escape(result.message))


@main.command(name="help")
def help_cmd() -> None:
    """Show available commands."""
    glog.out(help_text())
