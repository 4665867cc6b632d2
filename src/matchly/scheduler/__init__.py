"""Box planning and round-robin scheduling for league starts."""

from .planner import compute_box_configuration, describe_configuration
from .round_robin import generate_round_robin, round_robin_match_count
from .service import partition_roster, shuffle_roster, start_league

__all__ = [
    "compute_box_configuration",
    "describe_configuration",
    "generate_round_robin",
    "partition_roster",
    "round_robin_match_count",
    "shuffle_roster",
    "start_league",
]
