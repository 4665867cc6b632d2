"""League value records: box options, configurations, boxes and matches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from matchly.config import DEFAULT_MAX_PLAYERS_PER_BOX, DEFAULT_MIN_PLAYERS_PER_BOX
from matchly.models.player import Player


BoxMode = Literal["automatic", "fixed", "bounded"]

MATCH_STATUS_SCHEDULED = "scheduled"

MIN_LEAGUE_PLAYERS = 4
MAX_LEAGUE_PLAYERS = 32


class BoxOptions(BaseModel):
    """Optional constraints for box planning.

    The fields are mutually exclusive in priority order: ``number_of_boxes``
    wins, then either bound, otherwise automatic sizing applies.
    """

    number_of_boxes: Optional[int] = None
    min_players_per_box: Optional[int] = None
    max_players_per_box: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def mode(self) -> BoxMode:
        if self.number_of_boxes is not None:
            return "fixed"
        if self.min_players_per_box is not None or self.max_players_per_box is not None:
            return "bounded"
        return "automatic"

    def resolved_bounds(self) -> Tuple[int, int]:
        """Return ``(min, max)`` with unset bounds replaced by their defaults."""

        low = self.min_players_per_box
        high = self.max_players_per_box
        return (
            DEFAULT_MIN_PLAYERS_PER_BOX if low is None else low,
            DEFAULT_MAX_PLAYERS_PER_BOX if high is None else high,
        )


@dataclass(frozen=True)
class BoxConfiguration:
    box_count: int
    sizes: Tuple[int, ...]
    players_per_box: int
    remainder: int
    mode: BoxMode = "automatic"

    @property
    def total_players(self) -> int:
        return sum(self.sizes)


@dataclass(frozen=True)
class Match:
    match_id: str
    box_id: str
    player1_id: str
    player2_id: str
    status: str = MATCH_STATUS_SCHEDULED


@dataclass(frozen=True)
class Box:
    box_id: str
    level: int
    name: str
    players: Tuple[Player, ...]

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def player_ids(self) -> Tuple[str, ...]:
        return tuple(player.player_id for player in self.players)


@dataclass(frozen=True)
class LeagueStartResult:
    league_id: str
    configuration: BoxConfiguration
    boxes: Tuple[Box, ...]
    matches: Tuple[Match, ...]

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    def matches_for(self, box_id: str) -> List[Match]:
        return [match for match in self.matches if match.box_id == box_id]


class LeagueSettings(BaseModel):
    """Settings a league must satisfy before it can be created."""

    name: str = Field(..., min_length=1)
    sport: str = Field(..., min_length=1)
    max_players: Optional[int] = Field(default=None, ge=MIN_LEAGUE_PLAYERS, le=MAX_LEAGUE_PLAYERS)

    model_config = ConfigDict(str_strip_whitespace=True)


_FIELD_LABELS = {
    "name": "Name",
    "sport": "Sport",
    "max_players": "Max players",
}


def _error_message(error: Mapping[str, Any]) -> str:
    field = str(error["loc"][0]) if error.get("loc") else ""
    label = _FIELD_LABELS.get(field, field)
    kind = error.get("type")
    if kind in {"missing", "string_too_short", "string_type"}:
        return f"{label} is required"
    if kind == "greater_than_equal":
        return f"{label} must be at least {MIN_LEAGUE_PLAYERS}"
    if kind == "less_than_equal":
        return f"{label} must be at most {MAX_LEAGUE_PLAYERS}"
    return f"{label}: {error.get('msg', 'invalid value')}"


def validate_league_settings(data: Mapping[str, Any]) -> List[str]:
    """Return human readable validation errors for league settings (empty when valid)."""

    try:
        LeagueSettings.model_validate(dict(data))
    except ValidationError as exc:
        return [_error_message(error) for error in exc.errors()]
    return []
