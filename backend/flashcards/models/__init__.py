from flashcards.models.card import Card
from flashcards.models.tag import Tag, DEFAULT_TAG_NAMES
from flashcards.models.user import User

__all__ = ["Card", "Tag", "User", "DEFAULT_TAG_NAMES"]
