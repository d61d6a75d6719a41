"""Domain model exports."""

from .candidate_pool import CandidatePool
from .session import GUESSES_PER_ROUND, GamePhase, GameSession
from .taxonomy import Category, NotFoundError, PriorityPath, Subcategory, Taxonomy

__all__ = [
    "CandidatePool",
    "Category",
    "GUESSES_PER_ROUND",
    "GamePhase",
    "GameSession",
    "NotFoundError",
    "PriorityPath",
    "Subcategory",
    "Taxonomy",
]
