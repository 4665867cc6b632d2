"""REST API for the matchly league scheduler."""

from __future__ import annotations

import logging
import random
from typing import Any

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from matchly.api.schemas import (
    BoxConfigurationResponse,
    BoxPlanRequest,
    ErrorResponse,
    LeagueStartRequest,
    LeagueStartResponse,
    LeagueValidationResponse,
)
from matchly.config import max_roster_size
from matchly.exceptions import BoxConfigurationError
from matchly.export import matches_to_csv
from matchly.models import LeagueStartResult, validate_league_settings
from matchly.scheduler import compute_box_configuration, describe_configuration, start_league


logger = logging.getLogger("uvicorn.error")


def _check_roster_limit(player_count: int) -> None:
    limit = max_roster_size()
    if player_count > limit:
        raise HTTPException(
            status_code=400,
            detail=f"Roster has {player_count} players; at most {limit} are accepted",
        )


def _run_league_start(payload: LeagueStartRequest) -> LeagueStartResult:
    _check_roster_limit(len(payload.players))
    rng = random.Random(payload.seed) if payload.seed is not None else None
    return start_league(
        [player.to_player() for player in payload.players],
        payload.to_options(),
        league_id=payload.league_id,
        rng=rng,
    )


def create_app() -> FastAPI:
    app = FastAPI(title="matchly league scheduler")

    @app.exception_handler(BoxConfigurationError)
    async def box_configuration_error(request: Request, exc: BoxConfigurationError) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        body = ErrorResponse(detail=exc.message, error=exc.code, player_count=exc.player_count)
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/boxes/plan", response_model=BoxConfigurationResponse)
    async def plan_boxes(payload: BoxPlanRequest) -> BoxConfigurationResponse:
        _check_roster_limit(payload.player_count)
        options = payload.to_options()
        configuration = compute_box_configuration(payload.player_count, options)
        return BoxConfigurationResponse.from_configuration(
            configuration,
            describe_configuration(configuration, options),
        )

    @app.post("/leagues/start", response_model=LeagueStartResponse)
    async def league_start(payload: LeagueStartRequest) -> LeagueStartResponse:
        result = _run_league_start(payload)
        return LeagueStartResponse.from_result(
            result,
            describe_configuration(result.configuration, payload.to_options()),
        )

    @app.post("/leagues/start/export.csv")
    async def league_start_export(payload: LeagueStartRequest) -> Response:
        result = _run_league_start(payload)
        filename = f"{result.league_id}-matches.csv"
        return Response(
            content=matches_to_csv(result),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.post("/leagues/validate", response_model=LeagueValidationResponse)
    async def validate_league(payload: dict[str, Any] = Body(...)) -> LeagueValidationResponse:
        errors = validate_league_settings(payload)
        return LeagueValidationResponse(valid=not errors, errors=errors)

    return app
