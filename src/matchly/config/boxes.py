"""Box sizing rules for automatic and bounded league starts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class BoxRule:
    min_players: int
    max_players: int
    box_count: int
    players_per_box: int

    def covers(self, player_count: int) -> bool:
        return self.min_players <= player_count <= self.max_players


SMALL_LEAGUE_THRESHOLD = 4
FALLBACK_BOX_SIZE = 8

DEFAULT_MIN_PLAYERS_PER_BOX = 2
DEFAULT_MAX_PLAYERS_PER_BOX = 8

_BOX_RULES: Tuple[BoxRule, ...] = (
    BoxRule(min_players=4, max_players=8, box_count=1, players_per_box=8),
    BoxRule(min_players=9, max_players=16, box_count=2, players_per_box=8),
    BoxRule(min_players=17, max_players=24, box_count=3, players_per_box=8),
    BoxRule(min_players=25, max_players=32, box_count=4, players_per_box=8),
)


def iter_box_rules() -> Iterable[BoxRule]:
    """Return an iterator over the automatic-mode lookup table."""

    return iter(_BOX_RULES)


def find_box_rule(player_count: int) -> Optional[BoxRule]:
    """Return the lookup entry covering ``player_count`` or ``None`` outside the table."""

    for rule in _BOX_RULES:
        if rule.covers(player_count):
            return rule
    return None
