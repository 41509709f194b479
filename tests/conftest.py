# tests/conftest.py

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from pathlib import Path

import pytest

from tox_todo.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "todos.db"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(db_path: Path, clock: FakeClock) -> TaskStore:
    """
    Real SQLite store in a temp dir.

    SQLite behaviour (AUTOINCREMENT, rowcount, rollback) is exactly what we want to test,
    so there is no in-memory fake here. The schema is created up front so raw
    helpers below can write to the file directly.
    """
    s = TaskStore(db_path, clock=clock)
    s.count_tasks()
    return s


@pytest.fixture()
def insert_raw(db_path: Path) -> Callable[[int, str], None]:
    """Insert a row with an explicit ID, bypassing TaskStore (to create ID gaps)."""

    def _insert(task_id: int, description: str) -> None:
        conn = sqlite3.connect(str(db_path))
        try:
            conn.execute(
                "INSERT INTO tasks(id, description, done, created_at) VALUES (?, ?, 0, 0)",
                (task_id, description),
            )
            conn.commit()
        finally:
            conn.close()

    return _insert


@pytest.fixture()
def fail_on(db_path: Path) -> Callable[[str], None]:
    """Install a trigger that aborts every INSERT or UPDATE on tasks (simulated write failure)."""

    def _install(event: str) -> None:
        conn = sqlite3.connect(str(db_path))
        try:
            conn.execute(
                f"CREATE TRIGGER fail_{event.lower()} BEFORE {event} ON tasks "
                "BEGIN SELECT RAISE(ABORT, 'disk full'); END"
            )
            conn.commit()
        finally:
            conn.close()

    return _install
