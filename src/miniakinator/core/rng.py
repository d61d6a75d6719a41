"""Seedable RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random; a seed makes guess order reproducible."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randrange(self, stop: int) -> int:
        """Return a random integer N such that 0 <= N < stop."""
        return self._random.randrange(stop)

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return seq[self.randrange(len(seq))]
