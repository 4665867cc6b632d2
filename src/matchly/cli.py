"""Command-line interface for starting a box league from a roster."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from matchly.config_loader import RosterMappingProfile
from matchly.exceptions import BoxConfigurationError
from matchly.export import boxes_to_csv, matches_to_csv
from matchly.ingest import generate_demo_players, load_roster_csv
from matchly.models import BoxOptions
from matchly.scheduler import describe_configuration, start_league


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split a roster into boxes and generate round-robin matches")
    parser.add_argument("roster", type=Path, nargs="?", help="Path to roster CSV", default=None)
    parser.add_argument("--demo", type=int, default=None, help="Use N placeholder players instead of a roster CSV")
    parser.add_argument(
        "--roster-column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., display_name=First|Last)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--league-id", default="league", help="Identifier used to build box and match ids")
    parser.add_argument("--boxes", type=int, default=None, help="Fixed number of boxes")
    parser.add_argument("--min-per-box", type=int, default=None, help="Minimum players per box")
    parser.add_argument("--max-per-box", type=int, default=None, help="Maximum players per box")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the roster shuffle")
    parser.add_argument("--no-shuffle", action="store_true", help="Keep roster order when filling boxes")
    parser.add_argument("--output", type=Path, default=Path("matches.csv"), help="Output CSV path for matches")
    parser.add_argument("--boxes-output", type=Path, default=None, help="Optional CSV path for box membership")
    parser.add_argument("--summary", type=Path, default=None, help="Optional path to write a JSON summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        roster_mapping = _parse_mapping(args.roster_column)
        if args.load_profile:
            profile = RosterMappingProfile.load(args.load_profile)
            roster_mapping = profile.roster_mapping | roster_mapping

        if args.demo is not None:
            players = generate_demo_players(args.demo)
        elif args.roster is not None:
            players = load_roster_csv(args.roster, mapping=roster_mapping or None)
        else:
            print("A roster CSV or --demo N is required", file=sys.stderr)
            return 2
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    if args.save_profile:
        RosterMappingProfile(roster_mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    options = BoxOptions(
        number_of_boxes=args.boxes,
        min_players_per_box=args.min_per_box,
        max_players_per_box=args.max_per_box,
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        result = start_league(
            players,
            options,
            league_id=args.league_id,
            rng=rng,
            shuffle=not args.no_shuffle,
        )
    except BoxConfigurationError as exc:
        print(f"Cannot start league: {exc.message}", file=sys.stderr)
        return 2

    description = describe_configuration(result.configuration, options)
    print(f"Created {description}")
    print(f"Generated {result.total_matches} matches")

    args.output.write_text(matches_to_csv(result), encoding="utf-8")
    print(f"Wrote matches to {args.output}")

    if args.boxes_output:
        args.boxes_output.write_text(boxes_to_csv(result), encoding="utf-8")
        print(f"Wrote box membership to {args.boxes_output}")

    if args.summary:
        summary_payload = {
            "league_id": result.league_id,
            "players": len(players),
            "mode": result.configuration.mode,
            "box_sizes": list(result.configuration.sizes),
            "boxes": [
                {"box_id": box.box_id, "level": box.level, "player_ids": list(box.player_ids)}
                for box in result.boxes
            ],
            "total_matches": result.total_matches,
        }
        args.summary.write_text(json.dumps(summary_payload, indent=2), encoding="utf-8")
        print(f"Wrote summary to {args.summary}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
