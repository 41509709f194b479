# tests/test_render.py

from __future__ import annotations

import pytest

from tox_todo.cli.render import EMPTY_MESSAGE, format_task_row, format_time_ago, render_task_table
from tox_todo.tasks.task_models import Task

NOW = 1_700_000_000.0


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [
        (0, "just now"),
        (59, "just now"),
        (60, "1 minute ago"),
        (5 * 60 + 30, "5 minutes ago"),
        (3600, "1 hour ago"),
        (23 * 3600, "23 hours ago"),
        (24 * 3600, "1 day ago"),
        (10 * 24 * 3600, "10 days ago"),
    ],
)
def test_format_time_ago(elapsed: float, expected: str) -> None:
    assert format_time_ago(NOW - elapsed, now=NOW) == expected


def test_render_empty_listing() -> None:
    assert render_task_table([], now=NOW) == [EMPTY_MESSAGE]


def test_render_table_rows() -> None:
    tasks = [
        Task(id=1, description="Call mom", done=False, created_at=NOW - 100),
        Task(id=12, description="Buy milk", done=True, created_at=NOW - 7200, completed_at=NOW - 7200),
    ]

    lines = render_task_table(tasks, now=NOW)

    assert lines == [
        "ID  STATUS  TASK",
        "--  ------  ----",
        " 1  [ ]  Call mom",
        "12  [✓]  Buy milk (completed 2 hours ago)",
    ]


def test_open_row_has_no_completion_suffix() -> None:
    task = Task(id=3, description="stretch", done=False, created_at=NOW)
    assert "completed" not in format_task_row(task, now=NOW)
