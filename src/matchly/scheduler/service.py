"""League start: plan boxes, shuffle the roster into them and pair each box."""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import List, Optional, Sequence

from matchly.config import shuffle_seed
from matchly.exceptions import DuplicatePlayer
from matchly.models import Box, BoxOptions, LeagueStartResult, Match, Player
from matchly.scheduler.planner import compute_box_configuration
from matchly.scheduler.round_robin import generate_round_robin


logger = logging.getLogger(__name__)


def _default_rng() -> random.Random:
    seed = shuffle_seed()
    if seed is None:
        return random.Random()
    logger.info("Shuffling rosters with fixed seed %s", seed)
    return random.Random(seed)


def shuffle_roster(players: Sequence[Player], rng: Optional[random.Random] = None) -> List[Player]:
    """Return a uniformly shuffled copy of ``players``; the input is left untouched."""

    roster = list(players)
    (rng or _default_rng()).shuffle(roster)
    return roster


def partition_roster(
    roster: Sequence[Player],
    sizes: Sequence[int],
    *,
    league_id: str = "league",
) -> List[Box]:
    """Slice ``roster`` into consecutive boxes whose lengths follow ``sizes``."""

    if sum(sizes) != len(roster):
        raise ValueError(
            f"Box sizes {list(sizes)} do not cover a roster of {len(roster)} players"
        )

    boxes: List[Box] = []
    start = 0
    for index, size in enumerate(sizes):
        level = index + 1
        boxes.append(
            Box(
                box_id=f"box-{league_id}-{level}",
                level=level,
                name=f"Box {level}",
                players=tuple(roster[start:start + size]),
            )
        )
        start += size
    return boxes


def _ensure_unique(players: Sequence[Player]) -> None:
    counts = Counter(player.player_id for player in players)
    duplicates = sorted(player_id for player_id, count in counts.items() if count > 1)
    if duplicates:
        preview = ", ".join(duplicates[:5])
        raise DuplicatePlayer(
            f"Roster lists the same player more than once: {preview}",
            player_count=len(players),
        )


def start_league(
    players: Sequence[Player],
    options: Optional[BoxOptions] = None,
    *,
    league_id: str = "league",
    rng: Optional[random.Random] = None,
    shuffle: bool = True,
) -> LeagueStartResult:
    """Assign ``players`` to boxes and generate every box's round-robin matches.

    Box planning errors propagate unchanged and nothing is built. With
    ``shuffle=False`` the roster order is used as-is, which lets callers pass
    a pre-shuffled roster; otherwise ``rng`` (or a default seeded from
    ``MATCHLY_SHUFFLE_SEED``) randomises box membership.
    """

    _ensure_unique(players)
    configuration = compute_box_configuration(len(players), options)

    roster = shuffle_roster(players, rng) if shuffle else list(players)
    boxes = partition_roster(roster, configuration.sizes, league_id=league_id)

    matches: List[Match] = []
    for box in boxes:
        matches.extend(generate_round_robin(box.players, box_id=box.box_id))

    result = LeagueStartResult(
        league_id=league_id,
        configuration=configuration,
        boxes=tuple(boxes),
        matches=tuple(matches),
    )
    logger.info(
        "Started league %s: %s players, %s boxes, %s matches",
        league_id,
        len(players),
        len(result.boxes),
        result.total_matches,
    )
    return result
