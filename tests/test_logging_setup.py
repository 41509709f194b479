# tests/test_logging_setup.py

from __future__ import annotations

import logging

from tox_todo.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tox_todo.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("tox_todo", logging.INFO))


def test_console_filter_mutes_third_party_below_error() -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("click", logging.WARNING))
    assert f.filter(_record("click", logging.ERROR))
    assert not f.filter(_record("tox_todo_extra", logging.INFO))
