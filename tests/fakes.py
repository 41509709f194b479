# tests/fakes.py

from __future__ import annotations


class FakeClock:
    """
    Deterministic clock for TaskStore.

    Starts at a fixed epoch and only moves when advance() is called.
    """

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
