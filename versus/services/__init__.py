"""
Service layer: use cases over the character store and the matchup engine.
"""
from .matchup_service import CharacterNotFoundError, compare_characters

__all__ = [
    "CharacterNotFoundError",
    "compare_characters",
]
