"""Canonical player model shared across ingest, scheduling and the API."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Player(BaseModel):
    """A league participant; the scheduler only relies on identity and roster order."""

    player_id: str = Field(..., min_length=1)
    display_name: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
