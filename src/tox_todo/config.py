# src/tox_todo/config.py

"""Settings loaded from environment variables (+ optional .env).

One Settings object is built per process by the CLI callback and passed down
explicitly; nothing here reads the environment at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TOX"

DEFAULT_DATA_DIR = Path("~/.tox")
DB_FILENAME = "todos.db"
LOG_FILENAME = "tox.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    db_path: Path

    @property
    def log_file_path(self) -> Path:
        return self.data_dir / LOG_FILENAME

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tox").strip() or "tox"
        log_level = _env_log_level(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        db_path = _env_path(_k("DB_PATH"), data_dir / DB_FILENAME)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            db_path=db_path,
        )


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings."""
    load_dotenv(override=False)
    return Settings.from_env()
