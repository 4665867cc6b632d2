"""Box planning: turn a player count plus optional constraints into box sizes."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from matchly.config import FALLBACK_BOX_SIZE, SMALL_LEAGUE_THRESHOLD, find_box_rule
from matchly.exceptions import (
    InsufficientPlayers,
    InvalidBoxCount,
    InvalidBounds,
    UnsatisfiableBounds,
)
from matchly.models import BoxConfiguration, BoxOptions


logger = logging.getLogger(__name__)


def _sizes_with_remainder(box_count: int, players_per_box: int, remainder: int) -> List[int]:
    """Every box gets ``players_per_box``; the last one also absorbs the remainder."""

    sizes = [players_per_box] * box_count
    sizes[-1] += remainder
    return sizes


def _automatic(player_count: int) -> BoxConfiguration:
    if player_count < SMALL_LEAGUE_THRESHOLD:
        return BoxConfiguration(
            box_count=1,
            sizes=(player_count,),
            players_per_box=player_count,
            remainder=0,
            mode="automatic",
        )

    rule = find_box_rule(player_count)
    if rule is not None:
        remainder = player_count % rule.players_per_box
        # Inside the table the remainder is the whole last box, not an extra.
        sizes = [rule.players_per_box] * rule.box_count
        if remainder:
            sizes[-1] = remainder
        return BoxConfiguration(
            box_count=rule.box_count,
            sizes=tuple(sizes),
            players_per_box=rule.players_per_box,
            remainder=remainder,
            mode="automatic",
        )

    box_count = math.ceil(player_count / FALLBACK_BOX_SIZE)
    players_per_box = player_count // box_count
    remainder = player_count % box_count
    return BoxConfiguration(
        box_count=box_count,
        sizes=tuple(_sizes_with_remainder(box_count, players_per_box, remainder)),
        players_per_box=players_per_box,
        remainder=remainder,
        mode="automatic",
    )


def _fixed(player_count: int, number_of_boxes: int) -> BoxConfiguration:
    if number_of_boxes <= 0:
        raise InvalidBoxCount(
            "Number of boxes must be greater than 0",
            player_count=player_count,
        )
    if number_of_boxes > player_count:
        raise InvalidBoxCount(
            f"Number of boxes ({number_of_boxes}) cannot be greater than number of players ({player_count})",
            player_count=player_count,
        )

    players_per_box = player_count // number_of_boxes
    remainder = player_count % number_of_boxes
    return BoxConfiguration(
        box_count=number_of_boxes,
        sizes=tuple(_sizes_with_remainder(number_of_boxes, players_per_box, remainder)),
        players_per_box=players_per_box,
        remainder=remainder,
        mode="fixed",
    )


def _bounded(player_count: int, min_players: int, max_players: int) -> BoxConfiguration:
    if min_players < 1:
        raise InvalidBounds(
            f"Minimum players per box must be at least 1, got {min_players}",
            player_count=player_count,
        )
    if min_players > max_players:
        raise InvalidBounds(
            "Minimum players per box cannot be greater than maximum players per box",
            player_count=player_count,
        )
    if player_count < min_players:
        raise InsufficientPlayers(
            f"Not enough players. Need at least {min_players} players.",
            player_count=player_count,
        )

    # Greedy: start from the most boxes the minimum allows and only ever add more.
    box_count = player_count // min_players
    players_per_box = player_count // box_count
    while players_per_box > max_players and box_count < player_count:
        box_count += 1
        players_per_box = player_count // box_count

    if players_per_box < min_players:
        raise UnsatisfiableBounds(
            f"Cannot create boxes with minimum {min_players} players. "
            "Try reducing min players or increasing total players.",
            player_count=player_count,
        )

    remainder = player_count % box_count
    sizes = _sizes_with_remainder(box_count, players_per_box, remainder)
    largest = max(sizes)
    if largest > max_players:
        raise UnsatisfiableBounds(
            f"Cannot create boxes with maximum {max_players} players. "
            f"The configuration would have {largest} players in some boxes. "
            "Try increasing max players or reducing total players.",
            player_count=player_count,
        )

    return BoxConfiguration(
        box_count=box_count,
        sizes=tuple(sizes),
        players_per_box=players_per_box,
        remainder=remainder,
        mode="bounded",
    )


def compute_box_configuration(
    player_count: int,
    options: Optional[BoxOptions] = None,
) -> BoxConfiguration:
    """Compute the number and sizes of boxes for ``player_count`` players.

    ``options`` selects the sizing mode: a fixed ``number_of_boxes`` takes
    priority, then ``min_players_per_box``/``max_players_per_box`` bounds,
    otherwise the automatic lookup table is used. Raises a
    :class:`~matchly.exceptions.BoxConfigurationError` subclass when the
    request cannot be satisfied.
    """

    options = options or BoxOptions()
    mode = options.mode
    if options.number_of_boxes is not None:
        configuration = _fixed(player_count, options.number_of_boxes)
    elif player_count < 1:
        raise InsufficientPlayers(
            "At least one player is required to plan boxes",
            player_count=player_count,
        )
    elif mode == "bounded":
        min_players, max_players = options.resolved_bounds()
        configuration = _bounded(player_count, min_players, max_players)
    else:
        configuration = _automatic(player_count)

    logger.info(
        "Planned %s box(es) for %s players in %s mode: %s",
        configuration.box_count,
        player_count,
        mode,
        list(configuration.sizes),
    )
    return configuration


def describe_configuration(
    configuration: BoxConfiguration,
    options: Optional[BoxOptions] = None,
) -> str:
    """Summarise a configuration, e.g. ``"3 boxes (custom: 3 boxes) with 8, 8, 4 players respectively"``."""

    options = options or BoxOptions()
    noun = "box" if configuration.box_count == 1 else "boxes"
    parts = [f"{configuration.box_count} {noun}"]
    if options.number_of_boxes is not None:
        parts.append(f"(custom: {options.number_of_boxes} boxes)")
    elif options.mode == "bounded":
        low, high = options.resolved_bounds()
        parts.append(f"(min: {low}, max: {high} players/box)")
    sizes = ", ".join(str(size) for size in configuration.sizes)
    parts.append(f"with {sizes} players respectively")
    return " ".join(parts)
