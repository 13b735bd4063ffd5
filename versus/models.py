"""
Data models for the versus backend.
Domain objects only. No lookup or API logic.

A character is a static record: identity fields, an 8-dimension combat stat
vector (0-100 by convention, never enforced) and a list of named abilities.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------- Stat names ----------
# Canonical order of the stat vector, by wire name (camelCase, as consumed by the UI).
STAT_NAMES: tuple[str, ...] = (
    "strength",
    "speed",
    "durability",
    "stamina",
    "energyOutput",
    "techniqueProficiency",
    "experience",
    "adaptability",
)

# Wire name -> dataclass attribute
_STAT_ATTRS: dict[str, str] = {
    "strength": "strength",
    "speed": "speed",
    "durability": "durability",
    "stamina": "stamina",
    "energyOutput": "energy_output",
    "techniqueProficiency": "technique_proficiency",
    "experience": "experience",
    "adaptability": "adaptability",
}


# ---------- Side (breakdown / scenario winner label) ----------
class Side(str, Enum):
    CHARACTER1 = "character1"
    CHARACTER2 = "character2"
    TIE = "tie"


# ---------- CombatStats ----------
@dataclass(frozen=True)
class CombatStats:
    """
    Eight numeric combat attributes. Values are floats; NaN is allowed and
    propagates through every computation that reads it.
    """
    strength: float
    speed: float
    durability: float
    stamina: float
    energy_output: float
    technique_proficiency: float
    experience: float
    adaptability: float

    @classmethod
    def from_dict(cls, data: dict[str, Any], default: float = math.nan) -> CombatStats:
        """
        Build from a dict keyed by wire name (energyOutput) or attribute name
        (energy_output). Missing keys take `default`.
        """
        values: dict[str, float] = {}
        for wire, attr in _STAT_ATTRS.items():
            raw = data.get(wire, data.get(attr))
            values[attr] = float(raw) if raw is not None else default
        return cls(**values)

    @classmethod
    def uniform(cls, value: float) -> CombatStats:
        """All eight slots set to the same value."""
        return cls(**{attr: value for attr in _STAT_ATTRS.values()})

    def value(self, stat_name: str) -> float:
        """Read one stat by wire name."""
        return getattr(self, _STAT_ATTRS[stat_name])

    def values(self) -> list[float]:
        return [self.value(name) for name in STAT_NAMES]

    def to_dict(self) -> dict[str, float]:
        return {name: self.value(name) for name in STAT_NAMES}


# ---------- Ability ----------
@dataclass(frozen=True)
class Ability:
    """A named ability. Carried through the engine; not weighted in scoring."""
    id: str
    name: str
    type: str = ""
    description: str = ""
    power_level: float = 50.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_power: float = 50.0) -> Ability:
        power = data.get("powerLevel", data.get("power_level"))
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            type=data.get("type") or "",
            description=data.get("description") or "",
            power_level=float(power) if power is not None else default_power,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "powerLevel": self.power_level,
        }


# ---------- Character ----------
@dataclass
class Character:
    """
    One record from the character store.
    feats / anti_feats / weaknesses are descriptive only; the engine never reads them.
    """
    id: str
    name: str
    stats: CombatStats
    abilities: list[Ability] = field(default_factory=list)
    universe: str = ""
    version: str = ""
    description: str = ""
    image_url: str = ""
    feats: list[str] = field(default_factory=list)
    anti_feats: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], default_stat: float = math.nan, default_power: float = 50.0
    ) -> Character:
        stats = data.get("stats") or {}
        if not isinstance(stats, dict):
            raise TypeError(f"stats must be an object, got {type(stats).__name__}")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            stats=CombatStats.from_dict(stats, default=default_stat),
            abilities=[Ability.from_dict(a, default_power=default_power) for a in data.get("abilities") or []],
            universe=data.get("universe") or "",
            version=data.get("version") or "",
            description=data.get("description") or "",
            image_url=data.get("imageUrl") or data.get("image_url") or "",
            feats=list(data.get("feats") or []),
            anti_feats=list(data.get("antiFeats") or data.get("anti_feats") or []),
            weaknesses=list(data.get("weaknesses") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "universe": self.universe,
            "version": self.version,
            "description": self.description,
            "imageUrl": self.image_url,
            "stats": self.stats.to_dict(),
            "abilities": [a.to_dict() for a in self.abilities],
        }
        if self.feats:
            d["feats"] = list(self.feats)
        if self.anti_feats:
            d["antiFeats"] = list(self.anti_feats)
        if self.weaknesses:
            d["weaknesses"] = list(self.weaknesses)
        return d
