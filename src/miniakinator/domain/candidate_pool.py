"""Working set of words consistent with the answers given so far."""
from __future__ import annotations

from typing import Iterable, List

from miniakinator.core.rng import RNG
from miniakinator.domain.taxonomy import Taxonomy

HINT_LETTER_INDEX = 2


class CandidatePool:
    """Guess pool narrowed by question answers and hint letters."""

    def __init__(self, taxonomy: Taxonomy, rng: RNG) -> None:
        self._taxonomy = taxonomy
        self._rng = rng
        self._words: List[str] = []

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def is_empty(self) -> bool:
        return not self._words

    def populate(self, words: Iterable[str]) -> None:
        """Replace the pool with a lower-cased copy of ``words``."""
        self._words = [word.lower() for word in words]

    def pick_guess(self) -> str | None:
        """Return a random member of the pool without removing it."""
        if not self._words:
            return None
        return self._rng.choice(self._words)

    def filter_by_hint_letter(self, letter: str) -> List[str]:
        """Keep words whose third character is ``letter``.

        A non-empty match replaces the pool. An empty match leaves the pool
        untouched so the caller can ask for another letter.
        """
        wanted = letter.lower()
        matches = [
            word
            for word in self._words
            if len(word) > HINT_LETTER_INDEX and word[HINT_LETTER_INDEX] == wanted
        ]
        if matches:
            self._words = matches
        return matches

    def contains(self, word: str) -> bool:
        """Case-insensitive check against every word in the taxonomy."""
        return self._taxonomy.contains_word(word)
