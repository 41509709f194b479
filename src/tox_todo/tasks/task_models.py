# src/tox_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """Display status derived from the stored done flag."""

    OPEN = "open"
    DONE = "done"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    done: bool
    created_at: float
    completed_at: float | None = None

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.DONE if self.done else TaskStatus.OPEN


class TaskError(Exception):
    """Base class for errors reported to the user."""


class InvalidInputError(TaskError, ValueError):
    """Empty description or malformed ID, rejected before any write."""


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"todo with id {task_id} not found")
        self.task_id = task_id


class StorageError(TaskError):
    """The SQLite file could not be opened, written or committed."""
