"""
Wisdom Lenses — ORM model registry.

Importing every model here ensures that Alembic (and any other tool that
inspects ``Base.metadata``) discovers all tables automatically.
"""

from wisdom_lenses.models.hexagram import Hexagram
from wisdom_lenses.models.memo import UserMemo
from wisdom_lenses.models.flashcard import FlashCardProgress
from wisdom_lenses.models.memorize import MemorizeCard, MemorizeSubject

__all__ = [
    "Hexagram",
    "UserMemo",
    "FlashCardProgress",
    "MemorizeSubject",
    "MemorizeCard",
]
