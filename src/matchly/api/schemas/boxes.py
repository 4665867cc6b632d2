from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from matchly.models import BoxConfiguration, BoxOptions


class BoxOptionsPayload(BaseModel):
    number_of_boxes: int | None = None
    min_players_per_box: int | None = None
    max_players_per_box: int | None = None

    def to_options(self) -> BoxOptions:
        return BoxOptions(
            number_of_boxes=self.number_of_boxes,
            min_players_per_box=self.min_players_per_box,
            max_players_per_box=self.max_players_per_box,
        )


class BoxPlanRequest(BoxOptionsPayload):
    player_count: int


class BoxConfigurationResponse(BaseModel):
    box_count: int
    sizes: List[int]
    players_per_box: int
    remainder: int
    mode: Literal["automatic", "fixed", "bounded"]
    total_players: int
    description: str = ""

    @classmethod
    def from_configuration(cls, configuration: BoxConfiguration, description: str = "") -> "BoxConfigurationResponse":
        return cls(
            box_count=configuration.box_count,
            sizes=list(configuration.sizes),
            players_per_box=configuration.players_per_box,
            remainder=configuration.remainder,
            mode=configuration.mode,
            total_players=configuration.total_players,
            description=description,
        )


class ErrorResponse(BaseModel):
    detail: str
    error: str
    player_count: int | None = Field(default=None)
