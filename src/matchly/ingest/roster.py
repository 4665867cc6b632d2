"""Helpers to load roster CSVs and emit canonical player records."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from matchly.models import Player


logger = logging.getLogger(__name__)

DEFAULT_ROSTER_MAPPING = {
    "player_id": "player_id",
    "display_name": "display_name",
}


class RosterRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str = ""
    extra: dict[str, str] = {}

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "RosterRow":
        def extract(spec: Optional[str | Sequence[str]], *, default: Optional[str] = None) -> Optional[str]:
            if spec is None:
                return default
            if isinstance(spec, str):
                value = row.get(spec)
                return value.strip() if value is not None else default
            parts = [row.get(col, "").strip() for col in spec if row.get(col)]
            return " ".join(parts) if parts else default

        def parse_spec(key: str) -> Optional[str | Sequence[str]]:
            spec = mapping.get(key)
            if spec is None:
                return None
            if "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        used = {
            part.strip()
            for key in ("player_id", "display_name")
            for part in (mapping.get(key) or "").split("|")
        }
        extra = {
            key: (value or "").strip()
            for key, value in row.items()
            if key is not None and key not in used
        }
        return cls(
            raw_id=extract(parse_spec("player_id")),
            raw_name=extract(parse_spec("display_name"), default="") or "",
            extra=extra,
        )


def rows_to_players(rows: Iterable[RosterRow]) -> List[Player]:
    """Convert roster rows to players, skipping rows without an id and repeated ids."""

    players: List[Player] = []
    seen: set[str] = set()
    for line_no, row in enumerate(rows, start=1):
        if not row.raw_id:
            logger.warning("Skipping roster row %s without a player id", line_no)
            continue
        if row.raw_id in seen:
            logger.warning("Skipping duplicate roster entry for player %s (row %s)", row.raw_id, line_no)
            continue
        seen.add(row.raw_id)
        players.append(
            Player(
                player_id=row.raw_id,
                display_name=row.raw_name or row.raw_id,
                metadata=dict(row.extra),
            )
        )
    return players


def load_roster_rows(path: Path, mapping: Optional[Mapping[str, str]] = None) -> List[RosterRow]:
    column_map = dict(DEFAULT_ROSTER_MAPPING)
    if mapping:
        column_map.update(mapping)
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        return [RosterRow.from_mapping(row, column_map) for row in reader]


def load_roster_csv(path: Path, mapping: Optional[Mapping[str, str]] = None) -> List[Player]:
    """Load players from a roster CSV using an optional column mapping.

    ``mapping`` maps ``player_id`` and ``display_name`` to CSV headers; use
    ``"First|Last"`` to join several columns with a space.
    """

    players = rows_to_players(load_roster_rows(path, mapping))
    logger.info("Loaded %s players from %s", len(players), path)
    return players


def generate_demo_players(count: int, prefix: str = "player") -> List[Player]:
    """Build a placeholder roster (``player-1``/``Player1`` ...) for trials and demos."""

    if count < 0:
        raise ValueError("count must be non-negative")
    return [
        Player(player_id=f"{prefix}-{index}", display_name=f"Player{index}")
        for index in range(1, count + 1)
    ]
