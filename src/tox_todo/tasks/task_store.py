# src/tox_todo/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Callable, Iterator
from pathlib import Path

from .task_models import InvalidInputError, StorageError, Task, TaskNotFoundError

logger = logging.getLogger(__name__)

StagedRow = tuple[str, int, float, float | None]

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class TaskStore:
    """
    SQLite task store.

    The schema is a single table created on first use (no migrations).

    Transactions:
    - each public method opens its own SQLite connection and closes it afterwards
    - the schema is created inside the first transaction, so a one-shot command
      opens exactly one connection
    - writes run inside one BEGIN IMMEDIATE ... COMMIT block
    - any exception inside the block rolls the whole block back
    - sqlite3 errors surface as StorageError; nothing is retried

    IDs are AUTOINCREMENT rowids. delete_task() always renumbers the remaining
    rows, so the visible ID space stays 1..N with no gaps.
    """

    def __init__(
        self,
        db_path: str | Path = "todos.db",
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._db_path = Path(db_path)
        self._clock = clock
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"could not create directory {self._db_path.parent}: {exc}") from exc
        self._schema_ready = False
        logger.info("TaskStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        try:
            # isolation_level=None: transactions are opened explicitly in _transaction().
            conn = sqlite3.connect(str(self._db_path), timeout=30.0, isolation_level=None)
        except sqlite3.Error as exc:
            logger.error("Could not open database db=%s: %s", self._db_path, exc)
            raise StorageError(f"could not open database {self._db_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _rollback(conn: sqlite3.Connection) -> None:
        if not conn.in_transaction:
            return
        try:
            conn.rollback()
        except sqlite3.Error:
            logger.warning("Rollback failed", exc_info=True)

    @contextlib.contextmanager
    def _transaction(self, action: str, *, write: bool = True) -> Iterator[sqlite3.Connection]:
        """
        Run the body in one transaction: commit on normal exit, roll back otherwise.

        `action` completes the error message "could not <action>".
        """
        conn = self._get_conn()
        try:
            conn.execute("BEGIN IMMEDIATE" if write else "BEGIN")
            if not self._schema_ready:
                self._ensure_schema(conn)
            yield conn
            conn.execute("COMMIT")
            self._schema_ready = True
        except sqlite3.Error as exc:
            self._rollback(conn)
            logger.exception("TaskStore failed to %s db=%s", action, self._db_path)
            raise StorageError(f"could not {action}: {exc}") from exc
        except BaseException:
            self._rollback(conn)
            raise
        finally:
            conn.close()

    @staticmethod
    def _ensure_schema(conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                done INTEGER NOT NULL DEFAULT 0,
                created_at REAL NOT NULL,
                completed_at REAL
            )
            """
        )

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["description"]),
            done=bool(row["done"]),
            created_at=float(row["created_at"]),
            completed_at=float(row["completed_at"]) if row["completed_at"] is not None else None,
        )

    @staticmethod
    def _check_id(task_id: int) -> int:
        """No row can have an ID outside SQLite's INTEGER range; report it as missing."""
        tid = int(task_id)
        if not SQLITE_INT_MIN <= tid <= SQLITE_INT_MAX:
            raise TaskNotFoundError(tid)
        return tid

    # ---- reindexing ----

    @staticmethod
    def _stage_rows(conn: sqlite3.Connection) -> list[StagedRow]:
        cur = conn.execute(
            "SELECT description, done, created_at, completed_at FROM tasks ORDER BY id ASC"
        )
        return [
            (row["description"], row["done"], row["created_at"], row["completed_at"])
            for row in cur.fetchall()
        ]

    @staticmethod
    def _insert_staged(conn: sqlite3.Connection, staged: list[StagedRow]) -> None:
        conn.executemany(
            "INSERT INTO tasks(description, done, created_at, completed_at) VALUES (?, ?, ?, ?)",
            staged,
        )

    def _reindex(self, conn: sqlite3.Connection) -> int:
        """
        Renumber every row to 1..N in current ID order. Must run inside a transaction.

        Rows are staged in memory, the table is cleared, the AUTOINCREMENT counter
        is reset and the rows are reinserted so SQLite assigns fresh IDs.
        """
        staged = self._stage_rows(conn)
        conn.execute("DELETE FROM tasks")
        conn.execute("DELETE FROM sqlite_sequence WHERE name = 'tasks'")
        self._insert_staged(conn, staged)
        n = len(staged)
        staged.clear()
        return n

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._transaction("count todos", write=False) as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        return int(n)

    def add_task(self, description: str) -> int:
        text = (description or "").strip()
        if not text:
            raise InvalidInputError("Task cannot be empty")
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidInputError("Task text is not valid UTF-8") from None

        now = self._clock()
        with self._transaction("add todo") as conn:
            cur = conn.execute(
                "INSERT INTO tasks(description, done, created_at) VALUES (?, 0, ?)",
                (text, float(now)),
            )
            rowid = cur.lastrowid
            if rowid is None:
                raise StorageError("SQLite did not return lastrowid for todos insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s", task_id)
        return task_id

    def list_tasks(self, include_completed: bool = False) -> list[Task]:
        """
        Return a fresh snapshot of tasks, open ones first, then by ID.

        Completed tasks are left out unless include_completed is set.
        """
        sql = "SELECT id, description, done, created_at, completed_at FROM tasks"
        if not include_completed:
            sql += " WHERE done = 0"
        sql += " ORDER BY done ASC, id ASC"

        with self._transaction("query todos", write=False) as conn:
            rows = conn.execute(sql).fetchall()
        return [self._row_to_task(r) for r in rows]

    def complete_task(self, task_id: int) -> None:
        """
        Mark a task done and stamp completed_at.

        Completing an already-done task just moves completed_at to now.
        """
        tid = self._check_id(task_id)
        now = self._clock()
        with self._transaction("mark todo as done") as conn:
            cur = conn.execute(
                "UPDATE tasks SET done = 1, completed_at = ? WHERE id = ?",
                (float(now), tid),
            )
            if cur.rowcount == 0:
                raise TaskNotFoundError(task_id)
        logger.debug("Task completed id=%s", task_id)

    def delete_task(self, task_id: int) -> None:
        """Delete one task and renumber the rest, all in one transaction."""
        tid = self._check_id(task_id)
        with self._transaction("delete todo") as conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (tid,))
            if cur.rowcount == 0:
                raise TaskNotFoundError(task_id)
            remaining = self._reindex(conn)
        logger.debug("Task deleted id=%s remaining=%s", task_id, remaining)

    def reindex_all(self) -> None:
        with self._transaction("reindex todos") as conn:
            n = self._reindex(conn)
        logger.info("Reindexed %s todos", n)
