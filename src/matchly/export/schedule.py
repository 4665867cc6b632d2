"""CSV export helpers for league start results."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable, Sequence

from matchly.models import LeagueStartResult


BOX_HEADERS: tuple[str, ...] = ("box_id", "level", "name", "player_id", "display_name")
MATCH_HEADERS: tuple[str, ...] = ("match_id", "box_id", "level", "player1_id", "player2_id", "status")


def _render(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(headers)
    for row in rows:
        writer.writerow(row)
    return buffer.getvalue()


def boxes_to_csv(result: LeagueStartResult) -> str:
    """One row per box membership, boxes in level order."""

    rows = (
        (box.box_id, box.level, box.name, player.player_id, player.display_name)
        for box in result.boxes
        for player in box.players
    )
    return _render(BOX_HEADERS, rows)


def matches_to_csv(result: LeagueStartResult) -> str:
    """One row per match in schedule order."""

    levels = {box.box_id: box.level for box in result.boxes}
    rows = (
        (
            match.match_id,
            match.box_id,
            levels.get(match.box_id, ""),
            match.player1_id,
            match.player2_id,
            match.status,
        )
        for match in result.matches
    )
    return _render(MATCH_HEADERS, rows)
