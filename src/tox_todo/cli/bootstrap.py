# src/tox_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- configures logging from settings,
- builds the TaskStore a command runs against.

Directories are created only where something is written: the data dir for the
log file, and the database's parent dir (by TaskStore itself).
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def configure(*, verbose: bool = False, settings: Settings | None = None) -> Settings:
    """
    Load settings and set up logging for this process.

    Settings stay injectable so tests can avoid reading the real environment.
    """
    if settings is None:
        settings = get_settings()

    console_level = logging.INFO if verbose else settings.console_level
    log_file = None
    if settings.log_to_file:
        try:
            settings.data_dir.mkdir(parents=True, exist_ok=True)
            log_file = settings.log_file_path
        except OSError:
            # No file log; the store reports the directory problem when it is opened.
            log_file = None

    setup_logging(log_file=log_file, console_level=console_level)
    logger.debug("Starting %s db=%s", settings.app_name, settings.db_path)
    return settings


def open_store(settings: Settings) -> TaskStore:
    return TaskStore(settings.db_path)
