"""Per play-through game session state."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from miniakinator.domain.taxonomy import Category, Subcategory

GUESSES_PER_ROUND = 3


class GamePhase(Enum):
    """Phases of the narrowing state machine."""

    INIT = "init"
    CATEGORY_QUESTION = "category_question"
    SUBCATEGORY_QUESTION = "subcategory_question"
    GUESSING = "guessing"
    HINT = "hint"
    RESULT = "result"


@dataclass(slots=True)
class GameSession:
    """Tracks one play-through; replaced wholesale on reset."""

    phase: GamePhase = GamePhase.INIT
    category_questions: List[Category] = field(default_factory=list)
    subcategory_questions: List[Subcategory] = field(default_factory=list)
    category_index: int = 0
    subcategory_index: int = 0
    selected_category_id: str | None = None
    selected_subcategory_id: str | None = None
    current_guess: str | None = None
    guesses_remaining: int = GUESSES_PER_ROUND
    hint_letter: str | None = None
    agent_won: bool = False
    resolved_word: str | None = None
    word_supported: bool | None = None
    awaiting_give_up_word: bool = False
    hint_rejected: bool = False

    @property
    def current_category(self) -> Category | None:
        if self.category_index < len(self.category_questions):
            return self.category_questions[self.category_index]
        return None

    @property
    def current_subcategory(self) -> Subcategory | None:
        if self.subcategory_index < len(self.subcategory_questions):
            return self.subcategory_questions[self.subcategory_index]
        return None
