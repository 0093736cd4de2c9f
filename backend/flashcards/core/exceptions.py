"""
Application exceptions.

Each class maps to one HTTP outcome in ``flashcards.main``; handlers never
retry, every failure is terminal for the request that raised it.
"""


class FlashcardsError(Exception):
    """Base exception for all application errors."""
    pass


class ValidationError(FlashcardsError):
    """Raised when submitted input is missing or malformed."""
    pass


class NotFoundError(FlashcardsError):
    """Raised when a requested resource does not exist."""
    pass


class ConflictError(FlashcardsError):
    """Raised when a resource already exists (duplicate deck name)."""
    pass


class AuthenticationError(FlashcardsError):
    """Raised when a request needs a logged-in session and has none."""
    pass


class StoreError(FlashcardsError):
    """Raised when a deck file cannot be opened or initialised."""
    pass


class StoreUnavailableError(StoreError):
    """Raised when no store is active or the handle was closed by a switch."""
    pass


class StoreNotFoundError(NotFoundError):
    """Raised when switching to a deck file that does not exist."""
    pass


class HintServiceError(FlashcardsError):
    """Raised when a hint cannot be produced by the completion service."""
    pass
