"""Lightweight REST client for the matchly API."""

from __future__ import annotations

import argparse
import csv
import json
from pathlib import Path

import httpx


def read_players(path: Path) -> list[dict[str, str]]:
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        return [
            {"player_id": row["player_id"], "display_name": row.get("display_name", "")}
            for row in reader
            if row.get("player_id")
        ]


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the matchly REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV with player_id,display_name columns")
    parser.add_argument("--plan", type=int, metavar="PLAYERS", help="Only plan boxes for this many players")
    parser.add_argument("--boxes", type=int, default=None, help="Fixed number of boxes")
    parser.add_argument("--min-per-box", type=int, default=None, help="Minimum players per box")
    parser.add_argument("--max-per-box", type=int, default=None, help="Maximum players per box")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the roster shuffle")
    parser.add_argument("--league-id", default="league", help="League identifier")
    parser.add_argument("--export-path", type=Path, help="Download the match CSV to this path")
    args = parser.parse_args()

    options = {
        "number_of_boxes": args.boxes,
        "min_players_per_box": args.min_per_box,
        "max_players_per_box": args.max_per_box,
    }

    with httpx.Client(base_url=args.base_url) as client:
        if args.plan is not None:
            resp = client.post("/boxes/plan", json={"player_count": args.plan, **options})
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None:
            raise SystemExit("a roster CSV is required unless using --plan")

        payload = {
            "league_id": args.league_id,
            "players": read_players(args.roster),
            "seed": args.seed,
            **options,
        }
        if args.export_path:
            resp = client.post("/leagues/start/export.csv", json=payload)
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            args.export_path.write_text(resp.text)
            print(f"CSV export saved to {args.export_path}")
            return

        resp = client.post("/leagues/start", json=payload)
        if resp.status_code == 400:
            raise SystemExit(resp.json()["detail"])
        resp.raise_for_status()
        body = resp.json()
        print("Configuration:", body["configuration"]["description"])
        print(f"Received {body['total_matches']} matches across {len(body['boxes'])} boxes")


if __name__ == "__main__":
    main()
