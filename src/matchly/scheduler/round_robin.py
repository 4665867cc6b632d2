"""Round-robin pairing within a single box."""

from __future__ import annotations

from typing import List, Sequence

from matchly.models import MATCH_STATUS_SCHEDULED, Match, Player


def round_robin_match_count(player_count: int) -> int:
    """Number of unique pairings among ``player_count`` players."""

    if player_count < 2:
        return 0
    return player_count * (player_count - 1) // 2


def generate_round_robin(players: Sequence[Player], *, box_id: str = "box") -> List[Match]:
    """Pair every player with every other player exactly once.

    Pairs are emitted with ``i`` ascending, then ``j`` ascending, which is the
    canonical ordering of matches within a box. Fewer than two players yield
    no matches. Date or round assignment is left to the caller.
    """

    matches: List[Match] = []
    for i in range(len(players)):
        for j in range(i + 1, len(players)):
            matches.append(
                Match(
                    match_id=f"match-{box_id}-{i}-{j}",
                    box_id=box_id,
                    player1_id=players[i].player_id,
                    player2_id=players[j].player_id,
                    status=MATCH_STATUS_SCHEDULED,
                )
            )
    return matches
