from datetime import timedelta

import pytest

from tests.factories import make_basketball, make_goal
from utils.helpers import utcnow


@pytest.mark.asyncio
async def test_get_own_profile(client, login):
    login("user-1")

    response = await client.get("/api/v1/athletes/me")

    assert response.status_code == 200
    assert response.json()["_id"] == "athlete-1"


@pytest.mark.asyncio
async def test_coach_has_no_own_profile(client, login):
    login("coach-1")

    response = await client.get("/api/v1/athletes/me")

    assert response.status_code == 404
    assert response.json()["detail"] == "Athlete profile not found"


@pytest.mark.asyncio
async def test_update_own_profile(client, login, repository):
    login("user-1")

    response = await client.put("/api/v1/athletes/me", json={"position": "Forward", "height": {"feet": 6, "inches": 2}})

    assert response.status_code == 200
    assert response.json()["position"] == "Forward"
    assert repository.athletes["athlete-1"].height.feet == 6
    assert repository.athletes["athlete-1"].coach_id == "coach-1"


@pytest.mark.asyncio
async def test_profile_update_validates_age(client, login):
    login("user-1")

    response = await client.put("/api/v1/athletes/me", json={"age": 4})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_summary_uses_recent_window(client, login, repository):
    now = utcnow()
    repository.add(
        make_basketball(now - timedelta(days=2), points=20),
        make_basketball(now - timedelta(days=9), points=10),
        make_basketball(now - timedelta(days=45), points=40),
        make_goal(),
        make_goal(status="completed"),
    )
    login("user-1")

    response = await client.get("/api/v1/athletes/me/summary")

    data = response.json()
    assert data["total_games"] == 2
    assert [s["stats"]["points"] for s in data["recent_stats"]] == [20, 10]
    assert data["averages"]["average_points"] == 15
    assert len(data["active_goals"]) == 1


@pytest.mark.asyncio
async def test_parent_can_view_athlete(client, login):
    login("parent-1")

    response = await client.get("/api/v1/athletes/athlete-1")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_other_coach_cannot_view_athlete(client, login):
    login("coach-2")

    response = await client.get("/api/v1/athletes/athlete-1")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_coach_lists_only_own_athletes(client, login):
    login("coach-1")

    response = await client.get("/api/v1/athletes/")

    data = response.json()
    assert data["total"] == 1
    assert data["athletes"][0]["_id"] == "athlete-1"


@pytest.mark.asyncio
async def test_admin_lists_team(client, login):
    login("admin-1")

    response = await client.get("/api/v1/athletes/", params={"team": "Tigers"})

    assert response.json()["total"] == 2
