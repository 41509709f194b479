"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and error types
- task_store.py: SQLite-backed storage with transactional reindexing
"""

from .task_models import InvalidInputError, StorageError, Task, TaskError, TaskNotFoundError, TaskStatus
from .task_store import TaskStore

__all__ = [
    "InvalidInputError",
    "StorageError",
    "Task",
    "TaskError",
    "TaskNotFoundError",
    "TaskStatus",
    "TaskStore",
]
