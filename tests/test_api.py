import pytest
from httpx import ASGITransport, AsyncClient

from matchly.api import create_app


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _players(count: int) -> list[dict[str, str]]:
    return [{"player_id": f"u{index}", "display_name": f"User {index}"} for index in range(1, count + 1)]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_plan_automatic(client: AsyncClient):
    resp = await client.post("/boxes/plan", json={"player_count": 20})
    assert resp.status_code == 200
    body = resp.json()
    assert body["box_count"] == 3
    assert body["sizes"] == [8, 8, 4]
    assert body["mode"] == "automatic"
    assert body["total_players"] == 20
    assert body["description"] == "3 boxes with 8, 8, 4 players respectively"


@pytest.mark.anyio
async def test_plan_fixed_boxes(client: AsyncClient):
    resp = await client.post("/boxes/plan", json={"player_count": 7, "number_of_boxes": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["sizes"] == [3, 4]
    assert body["mode"] == "fixed"


@pytest.mark.anyio
async def test_plan_errors_map_to_400(client: AsyncClient):
    resp = await client.post("/boxes/plan", json={"player_count": 5, "number_of_boxes": 0})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "InvalidBoxCount"
    assert body["player_count"] == 5

    resp = await client.post(
        "/boxes/plan",
        json={"player_count": 10, "min_players_per_box": 6, "max_players_per_box": 4},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "InvalidBounds"


@pytest.mark.anyio
async def test_start_league(client: AsyncClient):
    payload = {"league_id": "autumn", "players": _players(8), "seed": 3}
    resp = await client.post("/leagues/start", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["league_id"] == "autumn"
    assert len(body["boxes"]) == 1
    assert body["boxes"][0]["box_id"] == "box-autumn-1"
    assert body["boxes"][0]["size"] == 8
    assert body["total_matches"] == 28
    assert len(body["matches"]) == 28
    assert all(match["status"] == "scheduled" for match in body["matches"])

    again = await client.post("/leagues/start", json=payload)
    assert again.json()["boxes"] == body["boxes"]


@pytest.mark.anyio
async def test_start_league_with_bounds(client: AsyncClient):
    payload = {"players": _players(10), "min_players_per_box": 3, "max_players_per_box": 4}
    resp = await client.post("/leagues/start", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert [box["size"] for box in body["boxes"]] == [3, 3, 4]
    assert body["total_matches"] == 3 + 3 + 6
    assert "(min: 3, max: 4 players/box)" in body["configuration"]["description"]


@pytest.mark.anyio
async def test_start_league_rejects_duplicates(client: AsyncClient):
    players = _players(4) + [{"player_id": "u1", "display_name": "Again"}]
    resp = await client.post("/leagues/start", json={"players": players})
    assert resp.status_code == 400
    assert resp.json()["error"] == "DuplicatePlayer"


@pytest.mark.anyio
async def test_start_league_roster_limit(client: AsyncClient, monkeypatch):
    monkeypatch.setenv("MATCHLY_MAX_ROSTER", "4")
    resp = await client.post("/leagues/start", json={"players": _players(5)})
    assert resp.status_code == 400
    assert "at most 4" in resp.json()["detail"]


@pytest.mark.anyio
async def test_plan_roster_limit(client: AsyncClient, monkeypatch):
    monkeypatch.setenv("MATCHLY_MAX_ROSTER", "4")
    resp = await client.post("/boxes/plan", json={"player_count": 200000})
    assert resp.status_code == 400
    assert "at most 4" in resp.json()["detail"]

    resp = await client.post("/boxes/plan", json={"player_count": 4})
    assert resp.status_code == 200
    assert resp.json()["sizes"] == [4]


@pytest.mark.anyio
async def test_start_league_export(client: AsyncClient):
    payload = {"league_id": "demo", "players": _players(4), "seed": 1}
    resp = await client.post("/leagues/start/export.csv", json=payload)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "demo-matches.csv" in resp.headers["content-disposition"]
    lines = resp.text.strip().splitlines()
    assert lines[0] == "match_id,box_id,level,player1_id,player2_id,status"
    assert len(lines) == 1 + 6


@pytest.mark.anyio
async def test_validate_league(client: AsyncClient):
    resp = await client.post("/leagues/validate", json={"name": "Test League", "sport": "squash", "max_players": 8})
    assert resp.status_code == 200
    assert resp.json() == {"valid": True, "errors": []}

    resp = await client.post("/leagues/validate", json={"sport": "squash", "max_players": 2})
    body = resp.json()
    assert body["valid"] is False
    assert "Name is required" in body["errors"]
    assert "Max players must be at least 4" in body["errors"]
