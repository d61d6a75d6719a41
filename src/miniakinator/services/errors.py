"""Service-layer exceptions."""


class GameServiceError(Exception):
    """Base exception for the game services."""


class TaxonomyUnavailableError(GameServiceError):
    """Raised when a session cannot start because the taxonomy failed to load."""


class InvalidActionError(GameServiceError):
    """Raised when an input event is not accepted in the current phase."""
