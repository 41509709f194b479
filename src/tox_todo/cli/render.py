# src/tox_todo/cli/render.py

"""Plain-text rendering for `list` output."""

from __future__ import annotations

import time
from collections.abc import Iterable

from ..tasks.task_models import Task, TaskStatus

HEADER = ("ID  STATUS  TASK", "--  ------  ----")
EMPTY_MESSAGE = "No todos found!"

STATUS_GLYPHS = {
    TaskStatus.OPEN: "[ ]",
    TaskStatus.DONE: "[✓]",
}

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit} ago" if n == 1 else f"{n} {unit}s ago"


def format_time_ago(ts: float, now: float | None = None) -> str:
    """Humanize an epoch timestamp relative to now ("just now", "3 hours ago", ...)."""
    if now is None:
        now = time.time()
    elapsed = now - ts

    if elapsed < _MINUTE:
        return "just now"
    if elapsed < _HOUR:
        return _plural(int(elapsed // _MINUTE), "minute")
    if elapsed < _DAY:
        return _plural(int(elapsed // _HOUR), "hour")
    return _plural(int(elapsed // _DAY), "day")


def format_task_row(task: Task, now: float | None = None) -> str:
    line = f"{task.id:2d}  {STATUS_GLYPHS[task.status]}  {task.description}"
    if task.done and task.completed_at is not None:
        line += f" (completed {format_time_ago(task.completed_at, now)})"
    return line


def render_task_table(tasks: Iterable[Task], now: float | None = None) -> list[str]:
    """Return output lines for a task listing; an empty listing yields EMPTY_MESSAGE."""
    rows = [format_task_row(t, now) for t in tasks]
    if not rows:
        return [EMPTY_MESSAGE]
    return [*HEADER, *rows]
