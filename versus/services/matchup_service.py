"""
Comparison use case: look both characters up, run the matchup engine.
The engine stays pure; lookup misses and logging live here.
"""
from __future__ import annotations

import logging

from versus.matchup import MatchupResult, compare
from versus.roster import CharacterRepository

logger = logging.getLogger(__name__)


class CharacterNotFoundError(LookupError):
    """No character with this id in the store."""

    def __init__(self, character_id: str) -> None:
        super().__init__(f"Character not found: {character_id}")
        self.character_id = character_id


def compare_characters(repo: CharacterRepository, char1_id: str, char2_id: str) -> MatchupResult:
    """
    Compare two stored characters by id. Order matters: char1 is "character1" in the result.
    Raises CharacterNotFoundError for the first id that does not resolve.
    """
    char1 = repo.lookup(char1_id)
    if char1 is None:
        logger.warning("Character 1 not found: %s", char1_id)
        raise CharacterNotFoundError(char1_id)
    char2 = repo.lookup(char2_id)
    if char2 is None:
        logger.warning("Character 2 not found: %s", char2_id)
        raise CharacterNotFoundError(char2_id)

    result = compare(
        char1.name,
        char1.stats,
        char1.abilities,
        char2.name,
        char2.stats,
        char2.abilities,
    )
    logger.info("Compared %s vs %s: %s", char1.id, char2.id, result.verdict)
    return result
