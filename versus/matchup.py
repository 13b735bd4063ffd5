"""
Head-to-head matchup scoring for two characters.
Pure heuristic over the 8-stat vectors: no simulation, no I/O, no shared state.

Stages, each consuming only raw inputs or earlier outputs:
  overall score -> stat breakdown -> key factors -> scenarios -> verdict -> analysis text.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Sequence

from versus.models import STAT_NAMES, Ability, CombatStats, Side

logger = logging.getLogger(__name__)


# ---------- Key factors ----------
KEY_FACTOR_THRESHOLD = 5  # |diff| must exceed this to count as differentiating
MAX_KEY_FACTORS = 3

# ---------- Confidence ----------
CONFIDENCE_BASE = 0.5
CONFIDENCE_CAP = 0.95
BLOODLUSTED_BONUS = 0.15
BLOODLUSTED_CAP = 1.0
PREP_TIME_BASE = 0.65  # not capped
IN_CHARACTER_PENALTY = 0.1  # not floored

# Raw power for the bloodlusted scenario
POWER_STATS = ("strength", "energyOutput", "speed")

# ---------- Verdict bands (checked top-down, first diff > threshold wins) ----------
# (threshold, template, character1 share when character1 is the winner)
VERDICT_BANDS: tuple[tuple[float, str, int], ...] = (
    (15, "{winner} wins decisively", 85),
    (10, "{winner} has a significant advantage", 70),
    (5, "{winner} has the edge", 60),
    (2, "Slight advantage to {winner}", 55),
)
EVEN_VERDICT = "{name1} vs {name2}: Evenly matched"
EVEN_WIN_PERCENTAGE = 50

# ---------- Analysis text ----------
ANALYSIS_FACTOR_COUNT = 2

# Breakdown display names
BREAKDOWN_ALIASES = {"techniqueProficiency": "technique"}


# ---------- Result types ----------


@dataclass(frozen=True)
class StatComparison:
    char1_score: float
    char2_score: float
    winner: Side

    def to_dict(self) -> dict[str, Any]:
        return {
            "char1Score": self.char1_score,
            "char2Score": self.char2_score,
            "winner": self.winner.value,
        }


@dataclass(frozen=True)
class KeyFactor:
    """One stat gap. `factor` is the stat's wire name; `score` is that side's raw value."""
    factor: str
    character: Side
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"factor": self.factor, "character": self.character.value, "score": self.score}


@dataclass(frozen=True)
class KeyFactors:
    advantages: tuple[KeyFactor, ...] = ()
    disadvantages: tuple[KeyFactor, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "advantages": [f.to_dict() for f in self.advantages],
            "disadvantages": [f.to_dict() for f in self.disadvantages],
        }


@dataclass(frozen=True)
class ScenarioOutcome:
    winner: Side
    confidence: float
    reasoning: str

    def to_dict(self) -> dict[str, Any]:
        return {"winner": self.winner.value, "confidence": self.confidence, "reasoning": self.reasoning}


@dataclass(frozen=True)
class Scenarios:
    random_encounter: ScenarioOutcome
    bloodlusted: ScenarioOutcome
    with_prep_time: ScenarioOutcome
    in_character: ScenarioOutcome

    def to_dict(self) -> dict[str, Any]:
        return {
            "randomEncounter": self.random_encounter.to_dict(),
            "bloodlusted": self.bloodlusted.to_dict(),
            "withPrepTime": self.with_prep_time.to_dict(),
            "inCharacter": self.in_character.to_dict(),
        }


@dataclass(frozen=True)
class Verdict:
    verdict: str
    win_percentage: int  # character1's share
    confidence_level: int | float  # NaN when the scores are NaN


@dataclass(frozen=True)
class MatchupResult:
    """Engine output. Built fresh per call; names are echoed, not validated."""
    character1_name: str
    character2_name: str
    verdict: str
    confidence_level: int | float
    win_percentage: int
    key_factors: KeyFactors
    stat_breakdown: dict[str, StatComparison]
    scenarios: Scenarios
    analysis: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "character1Name": self.character1_name,
            "character2Name": self.character2_name,
            "verdict": self.verdict,
            "confidenceLevel": self.confidence_level,
            "winPercentage": self.win_percentage,
            "keyFactors": self.key_factors.to_dict(),
            "statBreakdown": {k: v.to_dict() for k, v in self.stat_breakdown.items()},
            "scenarios": self.scenarios.to_dict(),
            "analysis": self.analysis,
        }


# ---------- Numeric helpers ----------


def _cap(value: float, ceiling: float) -> float:
    """min(ceiling, value), except NaN stays NaN."""
    if math.isnan(value):
        return value
    return min(ceiling, value)


def _round_half_up(value: float) -> int | float:
    """Round .5 up (2.5 -> 3, -2.5 -> -2). NaN and infinities are returned as-is."""
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def _side_by_score(score1: float, score2: float) -> Side:
    """character1 only on a strictly higher score; ties and NaN go to character2."""
    return Side.CHARACTER1 if score1 > score2 else Side.CHARACTER2


def _stat_winner(value1: float, value2: float) -> Side:
    if value1 > value2:
        return Side.CHARACTER1
    if value1 < value2:
        return Side.CHARACTER2
    # Equal, or either side NaN
    return Side.TIE


def _name_for(side: Side, name1: str, name2: str) -> str:
    return name1 if side == Side.CHARACTER1 else name2


# ---------- Stat aggregation ----------


def overall_score(stats: CombatStats) -> float:
    """Unweighted mean of the eight stats. NaN in, NaN out."""
    return sum(stats.values()) / len(STAT_NAMES)


def _raw_power(stats: CombatStats) -> float:
    return sum(stats.value(name) for name in POWER_STATS) / len(POWER_STATS)


def _mean_confidence(stats1: CombatStats, stats2: CombatStats) -> float:
    """min(0.95, 0.5 + |mean1 - mean2| / 100)."""
    diff = abs(overall_score(stats1) - overall_score(stats2))
    return _cap(CONFIDENCE_BASE + diff / 100, CONFIDENCE_CAP)


def stat_breakdown(stats1: CombatStats, stats2: CombatStats) -> dict[str, StatComparison]:
    """One entry per stat, keyed by display name (techniqueProficiency -> technique)."""
    breakdown: dict[str, StatComparison] = {}
    for name in STAT_NAMES:
        v1 = stats1.value(name)
        v2 = stats2.value(name)
        breakdown[BREAKDOWN_ALIASES.get(name, name)] = StatComparison(
            char1_score=v1,
            char2_score=v2,
            winner=_stat_winner(v1, v2),
        )
    return breakdown


# ---------- Key factors ----------


def identify_key_factors(
    stats1: CombatStats,
    stats2: CombatStats,
    abilities1: Sequence[Ability],
    abilities2: Sequence[Ability],
) -> KeyFactors:
    """
    Top stat gaps above the noise threshold, largest first (at most 3).
    Each gap yields an advantage for the higher side and a mirrored disadvantage.
    Equal gaps keep canonical stat order (stable sort). Abilities are accepted
    but do not enter the ranking.
    """
    gaps: list[tuple[str, float]] = []
    for name in STAT_NAMES:
        diff = abs(stats1.value(name) - stats2.value(name))
        if diff > KEY_FACTOR_THRESHOLD:
            gaps.append((name, diff))
    gaps.sort(key=lambda g: g[1], reverse=True)

    advantages: list[KeyFactor] = []
    disadvantages: list[KeyFactor] = []
    for name, _ in gaps[:MAX_KEY_FACTORS]:
        v1 = stats1.value(name)
        v2 = stats2.value(name)
        if v1 > v2:
            advantages.append(KeyFactor(name, Side.CHARACTER1, v1))
            disadvantages.append(KeyFactor(name, Side.CHARACTER2, v2))
        else:
            advantages.append(KeyFactor(name, Side.CHARACTER2, v2))
            disadvantages.append(KeyFactor(name, Side.CHARACTER1, v1))
    return KeyFactors(advantages=tuple(advantages), disadvantages=tuple(disadvantages))


# ---------- Scenarios ----------


def analyze_scenarios(
    name1: str,
    name2: str,
    stats1: CombatStats,
    stats2: CombatStats,
    abilities1: Sequence[Ability],
    abilities2: Sequence[Ability],
) -> Scenarios:
    """
    Four fixed scenario heuristics.

    with_prep_time confidence is not capped (can exceed 1.0) and in_character
    confidence is not floored. Both are left unclamped
    until the scoring rules say otherwise; see test_scenarios_unclamped_confidence.
    """
    random_winner = _side_by_score(overall_score(stats1), overall_score(stats2))
    random_confidence = _mean_confidence(stats1, stats2)

    bloodlusted_winner = _side_by_score(_raw_power(stats1), _raw_power(stats2))
    bloodlusted_confidence = _cap(random_confidence + BLOODLUSTED_BONUS, BLOODLUSTED_CAP)

    # Ties (and NaN) stay with character1 here
    prep_winner = Side.CHARACTER2 if stats2.adaptability > stats1.adaptability else Side.CHARACTER1
    prep_confidence = PREP_TIME_BASE + abs(stats1.adaptability - stats2.adaptability) / 100

    in_character_winner = random_winner
    in_character_confidence = random_confidence - IN_CHARACTER_PENALTY

    return Scenarios(
        random_encounter=ScenarioOutcome(
            winner=random_winner,
            confidence=random_confidence,
            reasoning=(
                "Based on overall combat capabilities and stat distribution. "
                f"{_name_for(random_winner, name1, name2)} has the edge in power and versatility."
            ),
        ),
        bloodlusted=ScenarioOutcome(
            winner=bloodlusted_winner,
            confidence=bloodlusted_confidence,
            reasoning=(
                "Fighting without restraint maximizes offensive power. "
                f"{_name_for(bloodlusted_winner, name1, name2)}'s power output and combat stats give the advantage."
            ),
        ),
        with_prep_time=ScenarioOutcome(
            winner=prep_winner,
            confidence=prep_confidence,
            reasoning=(
                "Preparation allows for strategy development. "
                f"{_name_for(prep_winner, name1, name2)}'s adaptability and intelligence enable better preparation."
            ),
        ),
        in_character=ScenarioOutcome(
            winner=in_character_winner,
            confidence=in_character_confidence,
            reasoning=(
                "Fighting in-character may introduce hesitation or tactical caution. "
                "Winners are determined by typical behavioral patterns."
            ),
        ),
    )


# ---------- Verdict ----------


def _verdict_band(diff: float) -> tuple[str, int] | None:
    for threshold, template, share in VERDICT_BANDS:
        if diff > threshold:
            return template, share
    return None


def compute_verdict(
    name1: str,
    overall1: float,
    abilities1: Sequence[Ability],
    name2: str,
    overall2: float,
    abilities2: Sequence[Ability],
) -> Verdict:
    """
    Verdict text and win split from the overall-score gap.
    Confidence reuses the mean-based formula on two uniform stat vectors.
    winPercentage is always character1's share; a NaN gap reads as evenly matched.
    """
    diff = abs(overall1 - overall2)
    confidence = _mean_confidence(CombatStats.uniform(overall1), CombatStats.uniform(overall2))
    char1_wins = overall1 > overall2
    winner = name1 if char1_wins else name2

    band = _verdict_band(diff)
    if band is None:
        verdict = EVEN_VERDICT.format(name1=name1, name2=name2)
        win_percentage = EVEN_WIN_PERCENTAGE
    else:
        template, share = band
        verdict = template.format(winner=winner)
        win_percentage = share if char1_wins else 100 - share

    return Verdict(
        verdict=verdict,
        win_percentage=win_percentage,
        confidence_level=_round_half_up(confidence * 100),
    )


# ---------- Analysis text ----------


def synthesize_analysis(
    name1: str,
    name2: str,
    breakdown: dict[str, StatComparison],
    key_factors: KeyFactors,
    scenarios: Scenarios,
) -> str:
    """Markdown summary: overview, stat dominance, critical factors, scenario note."""
    parts: list[str] = [
        "## Detailed Analysis\n\n",
        "### Overview\n",
        f"This matchup between {name1} and {name2} presents an interesting dynamic combat scenario. ",
        "Both combatants have unique strengths that would heavily influence the outcome.\n\n",
        "### Stat Dominance\n",
    ]

    wins1 = sum(1 for c in breakdown.values() if c.winner == Side.CHARACTER1)
    wins2 = sum(1 for c in breakdown.values() if c.winner == Side.CHARACTER2)
    parts.append(f"{name1} dominates in {wins1} stat categories, while {name2} leads in {wins2}. ")
    if wins1 > wins2:
        parts.append(f"This gives {name1} a broader combat advantage.\n\n")
    elif wins2 > wins1:
        parts.append(f"This gives {name2} a broader combat advantage.\n\n")
    else:
        parts.append("This creates a balanced matchup.\n\n")

    parts.append("### Critical Factors\n")
    for factor in key_factors.advantages[:ANALYSIS_FACTOR_COUNT]:
        name = _name_for(factor.character, name1, name2)
        parts.append(
            f"- **{name}**: Superior {factor.factor} ({_round_half_up(factor.score)}) "
            "gives decisive edge in direct combat.\n"
        )

    parts.append("\n### Scenario Analysis\n")
    parts.append(
        "Different scenarios significantly alter the outcome. Random encounters favor whichever "
        "character has more raw power, "
    )
    parts.append(
        "while scenarios with prep time allow for strategic adaptation and tactical planning.\n"
    )
    return "".join(parts)


# ---------- Entry point ----------


def compare(
    name1: str,
    stats1: CombatStats,
    abilities1: Sequence[Ability],
    name2: str,
    stats2: CombatStats,
    abilities2: Sequence[Ability],
) -> MatchupResult:
    """
    Full matchup for two characters.
    Deterministic: identical inputs always give an identical result (and byte-identical analysis).
    """
    overall1 = overall_score(stats1)
    overall2 = overall_score(stats2)
    breakdown = stat_breakdown(stats1, stats2)
    key_factors = identify_key_factors(stats1, stats2, abilities1, abilities2)
    scenarios = analyze_scenarios(name1, name2, stats1, stats2, abilities1, abilities2)
    verdict = compute_verdict(name1, overall1, abilities1, name2, overall2, abilities2)
    analysis = synthesize_analysis(name1, name2, breakdown, key_factors, scenarios)
    logger.debug(
        "matchup %s vs %s: overall %.2f / %.2f -> %s",
        name1, name2, overall1, overall2, verdict.verdict,
    )
    return MatchupResult(
        character1_name=name1,
        character2_name=name2,
        verdict=verdict.verdict,
        confidence_level=verdict.confidence_level,
        win_percentage=verdict.win_percentage,
        key_factors=key_factors,
        stat_breakdown=breakdown,
        scenarios=scenarios,
        analysis=analysis,
    )
