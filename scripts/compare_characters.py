#!/usr/bin/env python3
"""
Print a head-to-head matchup for two characters from the roster.
Run from project root:

  python3 scripts/compare_characters.py goku-namek-saga superman-dcu
  python3 scripts/compare_characters.py --list
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from versus.config import get_settings
from versus.logging_config import configure_logging
from versus.roster import RosterError, load_roster
from versus.services import CharacterNotFoundError, compare_characters


def _print_summary(result) -> None:
    name1, name2 = result.character1_name, result.character2_name
    print(f"{name1} vs {name2}")
    print(f"  Verdict:    {result.verdict}")
    print(f"  Win split:  {result.win_percentage}% / {100 - result.win_percentage}%")
    print(f"  Confidence: {result.confidence_level}%")
    print("  Scenarios:")
    for label, outcome in (
        ("Random encounter", result.scenarios.random_encounter),
        ("Bloodlusted", result.scenarios.bloodlusted),
        ("With prep time", result.scenarios.with_prep_time),
        ("In character", result.scenarios.in_character),
    ):
        winner = name1 if outcome.winner.value == "character1" else name2
        print(f"    {label:<17} {winner} ({outcome.confidence:.0%})")
    print()
    print(result.analysis)


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare two characters from the roster.")
    parser.add_argument("char1_id", nargs="?", help="Character 1 id")
    parser.add_argument("char2_id", nargs="?", help="Character 2 id")
    parser.add_argument("--roster", type=Path, default=None, help="Roster JSON (default: VERSUS_ROSTER_PATH or data/characters.json)")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--list", action="store_true", help="List character ids and exit")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    configure_logging(args.log_level)
    try:
        roster = load_roster(args.roster or get_settings().roster_path)
    except RosterError as e:
        raise SystemExit(str(e)) from e

    if args.list:
        for c in roster.list_all():
            print(f"{c.id:<24} {c.name} ({c.universe})")
        return
    if not args.char1_id or not args.char2_id:
        parser.error("two character ids are required (or --list)")

    try:
        result = compare_characters(roster, args.char1_id, args.char2_id)
    except CharacterNotFoundError as e:
        raise SystemExit(str(e)) from e

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_summary(result)


if __name__ == "__main__":
    main()
