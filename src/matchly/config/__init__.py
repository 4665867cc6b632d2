"""Configuration helpers for box sizing rules and environment settings."""

from .boxes import (
    DEFAULT_MAX_PLAYERS_PER_BOX,
    DEFAULT_MIN_PLAYERS_PER_BOX,
    FALLBACK_BOX_SIZE,
    SMALL_LEAGUE_THRESHOLD,
    BoxRule,
    find_box_rule,
    iter_box_rules,
)
from .settings import env_int, max_roster_size, shuffle_seed

__all__ = [
    "BoxRule",
    "DEFAULT_MAX_PLAYERS_PER_BOX",
    "DEFAULT_MIN_PLAYERS_PER_BOX",
    "FALLBACK_BOX_SIZE",
    "SMALL_LEAGUE_THRESHOLD",
    "env_int",
    "find_box_rule",
    "iter_box_rules",
    "max_roster_size",
    "shuffle_seed",
]
