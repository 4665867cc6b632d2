"""Canonical value records shared across the scheduler, ingest and API layers."""

from .player import Player
from .league import (
    MATCH_STATUS_SCHEDULED,
    Box,
    BoxConfiguration,
    BoxOptions,
    LeagueSettings,
    LeagueStartResult,
    Match,
    validate_league_settings,
)

__all__ = [
    "MATCH_STATUS_SCHEDULED",
    "Box",
    "BoxConfiguration",
    "BoxOptions",
    "LeagueSettings",
    "LeagueStartResult",
    "Match",
    "Player",
    "validate_league_settings",
]
