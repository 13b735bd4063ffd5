"""
Character store: static roster of character records loaded from JSON.
Lookup only. No scraping or database.

The scoring engine never imports this module; callers look records up here and
pass (name, stats, abilities) to versus.matchup.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Protocol

from versus.models import Character

logger = logging.getLogger(__name__)

# Stored records with a missing stat or ability power fall back to the midpoint.
DEFAULT_STAT_VALUE = 50.0


class RosterError(ValueError):
    """Roster file is unreadable, malformed, or has duplicate ids."""


class CharacterRepository(Protocol):
    """Read interface the API and services depend on."""

    def lookup(self, character_id: str) -> Character | None:
        ...

    def list_all(self) -> list[Character]:
        ...


def _normalize_id(character_id: str) -> str:
    return character_id.strip().lower()


class StaticRoster:
    """In-memory CharacterRepository. Ids match case-insensitively; list order is load order."""

    def __init__(self, characters: Iterable[Character]) -> None:
        self._by_id: dict[str, Character] = {}
        for c in characters:
            key = _normalize_id(c.id)
            if key in self._by_id:
                raise RosterError(f"Duplicate character id: {c.id}")
            self._by_id[key] = c

    def lookup(self, character_id: str) -> Character | None:
        return self._by_id.get(_normalize_id(character_id))

    def list_all(self) -> list[Character]:
        return list(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


def load_roster(path: str | Path) -> StaticRoster:
    """
    Load the roster JSON: {"characters": [{id, name, universe, ..., stats, abilities}, ...]}.
    Missing stats / power levels default to 50.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RosterError(f"Cannot read roster {path}: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("characters"), list):
        raise RosterError(f"Roster {path} must be an object with a 'characters' list")

    characters: list[Character] = []
    for i, raw in enumerate(data["characters"]):
        try:
            characters.append(
                Character.from_dict(raw, default_stat=DEFAULT_STAT_VALUE, default_power=DEFAULT_STAT_VALUE)
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise RosterError(f"Roster {path}: bad character entry #{i}: {e!r}") from e
    roster = StaticRoster(characters)
    logger.info("Loaded %d characters from %s", len(roster), path)
    return roster
