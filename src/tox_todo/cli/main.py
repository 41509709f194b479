# src/tox_todo/cli/main.py

"""
CLI entrypoint.

Every invocation is one-shot: the root callback loads settings and logging,
the command opens a TaskStore, performs exactly one operation and exits.
Input that cannot be a task (empty text, non-numeric IDs) is rejected here,
before the store is touched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Annotated

import typer

from ..config import Settings
from ..tasks.task_models import InvalidInputError, TaskError
from ..tasks.task_store import SQLITE_INT_MAX, SQLITE_INT_MIN
from .bootstrap import configure, open_store
from .render import render_task_table

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tox-todo",
    help=(
        "A simple CLI Todo Manager.\n\n"
        "Add, list, mark as done, and delete todos from the terminal."
    ),
    no_args_is_help=True,
    add_completion=False,
)

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Print informational log messages to stderr"),
]
TaskIdArgument = Annotated[str, typer.Argument(metavar="ID", help="Numeric todo ID")]


def parse_task_id(raw: str) -> int:
    try:
        tid = int(raw.strip())
    except ValueError:
        raise InvalidInputError(f"invalid ID: {raw}") from None
    if not SQLITE_INT_MIN <= tid <= SQLITE_INT_MAX:
        raise InvalidInputError(f"invalid ID: {raw}")
    return tid


def join_description(words: list[str] | None) -> str:
    text = " ".join(words or []).strip()
    if not text:
        raise InvalidInputError("Task cannot be empty")
    return text


def _run_and_handle(fn: Callable[[], None]) -> None:
    try:
        fn()
    except TaskError as exc:
        logger.debug("Command failed: %s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


@app.callback()
def root_callback(ctx: typer.Context, verbose: VerboseOption = False) -> None:
    ctx.obj = configure(verbose=verbose)


@app.command("add")
def add_cmd(
    ctx: typer.Context,
    words: Annotated[
        list[str] | None,
        typer.Argument(metavar="TASK...", help="Task text; several words are joined with spaces"),
    ] = None,
) -> None:
    """Add a new todo to your list.

    Example: tox-todo add Buy groceries
    """

    def _run() -> None:
        text = join_description(words)
        store = open_store(_settings(ctx))
        task_id = store.add_task(text)
        typer.echo(f"Added task #{task_id}: {text}")

    _run_and_handle(_run)


@app.command("list")
def list_cmd(
    ctx: typer.Context,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Show all todos, including completed ones"),
    ] = False,
) -> None:
    """Display your todos, by default only incomplete ones."""

    def _run() -> None:
        store = open_store(_settings(ctx))
        for line in render_task_table(store.list_tasks(include_completed=show_all)):
            typer.echo(line)

    _run_and_handle(_run)


@app.command("done")
def done_cmd(ctx: typer.Context, task_id: TaskIdArgument) -> None:
    """Mark a todo as completed by its ID."""

    def _run() -> None:
        tid = parse_task_id(task_id)
        store = open_store(_settings(ctx))
        store.complete_task(tid)
        typer.echo(f"Marked todo #{tid} as done")

    _run_and_handle(_run)


@app.command("delete")
def delete_cmd(ctx: typer.Context, task_id: TaskIdArgument) -> None:
    """Delete a todo permanently by its ID (aliases: del, rm).

    Remaining todos are renumbered so IDs stay 1..N.
    """

    def _run() -> None:
        tid = parse_task_id(task_id)
        store = open_store(_settings(ctx))
        store.delete_task(tid)
        typer.echo(f"Deleted todo #{tid}")

    _run_and_handle(_run)


app.command("del", hidden=True)(delete_cmd)
app.command("rm", hidden=True)(delete_cmd)


@app.command("reindex")
def reindex_cmd(ctx: typer.Context) -> None:
    """Reset and reorder all todo IDs to be sequential starting from 1."""

    def _run() -> None:
        store = open_store(_settings(ctx))
        store.reindex_all()
        typer.echo("Successfully reindexed all todos")

    _run_and_handle(_run)


def main() -> None:
    app(prog_name="tox-todo")


if __name__ == "__main__":
    main()
