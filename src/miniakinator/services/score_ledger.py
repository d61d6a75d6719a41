"""Persistent player score."""
from __future__ import annotations

from miniakinator.data.stores import ProgressStore


class ScoreLedger:
    """Unbounded integer score backed by the progress store."""

    def __init__(self, progress: ProgressStore) -> None:
        self._progress = progress

    def get(self) -> int:
        stored = self._progress.read_score()
        return stored if stored is not None else 0

    def set(self, value: int) -> None:
        self._progress.write_score(value)

    def add(self, delta: int) -> int:
        total = self.get() + delta
        self.set(total)
        return total
