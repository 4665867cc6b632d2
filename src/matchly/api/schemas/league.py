from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from matchly.models import LeagueStartResult, Player

from .boxes import BoxConfigurationResponse, BoxOptionsPayload


class PlayerPayload(BaseModel):
    player_id: str = Field(..., min_length=1)
    display_name: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def to_player(self) -> Player:
        return Player(
            player_id=self.player_id,
            display_name=self.display_name or self.player_id,
            metadata=self.metadata,
        )


class LeagueStartRequest(BoxOptionsPayload):
    league_id: str = Field(default="league", min_length=1)
    players: List[PlayerPayload]
    seed: int | None = None


class BoxPlayerResponse(BaseModel):
    player_id: str
    display_name: str


class BoxResponse(BaseModel):
    box_id: str
    level: int
    name: str
    size: int
    players: List[BoxPlayerResponse]


class MatchResponse(BaseModel):
    match_id: str
    box_id: str
    player1_id: str
    player2_id: str
    status: str


class LeagueStartResponse(BaseModel):
    league_id: str
    configuration: BoxConfigurationResponse
    boxes: List[BoxResponse]
    matches: List[MatchResponse]
    total_matches: int

    @classmethod
    def from_result(cls, result: LeagueStartResult, description: str = "") -> "LeagueStartResponse":
        return cls(
            league_id=result.league_id,
            configuration=BoxConfigurationResponse.from_configuration(result.configuration, description),
            boxes=[
                BoxResponse(
                    box_id=box.box_id,
                    level=box.level,
                    name=box.name,
                    size=box.size,
                    players=[
                        BoxPlayerResponse(player_id=player.player_id, display_name=player.display_name)
                        for player in box.players
                    ],
                )
                for box in result.boxes
            ],
            matches=[
                MatchResponse(
                    match_id=match.match_id,
                    box_id=match.box_id,
                    player1_id=match.player1_id,
                    player2_id=match.player2_id,
                    status=match.status,
                )
                for match in result.matches
            ],
            total_matches=result.total_matches,
        )


class LeagueValidationResponse(BaseModel):
    valid: bool
    errors: List[str]
