"""League box planning and round-robin scheduling."""

from matchly.exceptions import (
    BoxConfigurationError,
    DuplicatePlayer,
    InsufficientPlayers,
    InvalidBounds,
    InvalidBoxCount,
    MatchlyError,
    UnsatisfiableBounds,
)
from matchly.models import Box, BoxConfiguration, BoxOptions, LeagueStartResult, Match, Player
from matchly.scheduler import compute_box_configuration, generate_round_robin, start_league

__all__ = [
    "Box",
    "BoxConfiguration",
    "BoxConfigurationError",
    "BoxOptions",
    "DuplicatePlayer",
    "InsufficientPlayers",
    "InvalidBounds",
    "InvalidBoxCount",
    "LeagueStartResult",
    "Match",
    "MatchlyError",
    "Player",
    "UnsatisfiableBounds",
    "compute_box_configuration",
    "generate_round_robin",
    "start_league",
]
