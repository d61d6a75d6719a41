"""Service layer exports."""

from .errors import GameServiceError, InvalidActionError, TaxonomyUnavailableError
from .game_service import (
    ActionResult,
    CategoryConfirmedEvent,
    GameEvent,
    GameService,
    GameView,
    GuessMadeEvent,
    HintAcceptedEvent,
    HintRejectedEvent,
    NoWordsEvent,
    ScoreChangedEvent,
    SessionResolvedEvent,
    SubcategoryConfirmedEvent,
)
from .priority_ranker import PriorityRanker
from .score_ledger import ScoreLedger

__all__ = [
    "ActionResult",
    "CategoryConfirmedEvent",
    "GameEvent",
    "GameService",
    "GameServiceError",
    "GameView",
    "GuessMadeEvent",
    "HintAcceptedEvent",
    "HintRejectedEvent",
    "InvalidActionError",
    "NoWordsEvent",
    "PriorityRanker",
    "ScoreChangedEvent",
    "ScoreLedger",
    "SessionResolvedEvent",
    "SubcategoryConfirmedEvent",
    "TaxonomyUnavailableError",
]
