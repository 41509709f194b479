"""tox: a small command-line todo manager backed by SQLite."""

__version__ = "0.1.0"
