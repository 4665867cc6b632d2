"""Pydantic models for API I/O."""

from .boxes import BoxConfigurationResponse, BoxOptionsPayload, BoxPlanRequest, ErrorResponse
from .league import (
    BoxPlayerResponse,
    BoxResponse,
    LeagueStartRequest,
    LeagueStartResponse,
    LeagueValidationResponse,
    MatchResponse,
    PlayerPayload,
)

__all__ = [
    "BoxConfigurationResponse",
    "BoxOptionsPayload",
    "BoxPlanRequest",
    "BoxPlayerResponse",
    "BoxResponse",
    "ErrorResponse",
    "LeagueStartRequest",
    "LeagueStartResponse",
    "LeagueValidationResponse",
    "MatchResponse",
    "PlayerPayload",
]
