from datetime import timedelta
from urllib.parse import quote

import pytest

from api.report_routes import content_disposition
from schemas.athlete import TeamInfo
from tests.factories import make_athlete, make_basketball, make_goal
from utils.helpers import utcnow


@pytest.fixture
def season(repository):
    now = utcnow()
    repository.add(
        make_basketball(now - timedelta(days=10), opponent="Hawks", points=20, field_goals_made=8, field_goals_attempted=16),
        make_basketball(now - timedelta(days=3), opponent="Bulls", points=30, field_goals_made=10, field_goals_attempted=20),
        make_basketball(now - timedelta(days=200), opponent="Old", points=50),
        make_basketball(now - timedelta(days=5), athlete_id="athlete-2", points=12),
        make_goal(progress={"percentage": 50}),
        make_goal(status="completed", progress={"percentage": 100}),
    )
    return repository


@pytest.mark.asyncio
async def test_athlete_report_json(client, login, season):
    login("user-1")

    response = await client.get("/api/v1/reports/athlete/athlete-1")

    assert response.status_code == 200
    report = response.json()["report"]
    assert report["athlete"]["name"] == "Alex Rivera"
    assert report["athlete"]["coach"] == "Carla Diaz"
    assert report["stats"]["total_games"] == 2
    assert report["stats"]["analytics"]["average_points"] == 25
    assert report["stats"]["analytics"]["best_game"]["opponent"] == "Bulls"
    assert report["goals"]["total"] == 2
    assert report["summary"] == (
        "Played 2 games in the reporting period. "
        "Averaged 25.0 points, 0.0 rebounds, and 0.0 assists per game. "
        "Working on 1 active goals with 75% average progress. "
        "Successfully completed 1 goals."
    )


@pytest.mark.asyncio
async def test_athlete_report_pdf(client, login, season):
    login("user-1")

    response = await client.get("/api/v1/reports/athlete/athlete-1", params={"format": "pdf"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="Alex_Rivera_Report.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_athlete_cannot_see_another_report(client, login, season):
    login("user-2")

    response = await client.get("/api/v1/reports/athlete/athlete-1")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_unknown_format_rejected(client, login, season):
    login("user-1")

    response = await client.get("/api/v1/reports/athlete/athlete-1", params={"format": "xml"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_team_report(client, login, season):
    login("coach-1")

    response = await client.get("/api/v1/reports/team/Tigers")

    assert response.status_code == 200
    report = response.json()["report"]
    assert report["team"] == {"name": "Tigers", "athlete_count": 2, "sport": "basketball"}
    names = [a["name"] for a in report["athletes"]]
    assert sorted(names) == ["Alex Rivera", "Sam Lee"]
    alex = report["athletes"][names.index("Alex Rivera")]
    # only the active goal counts
    assert alex["goals"] == {"total": 1, "average_progress": 50}
    assert report["team_averages"]["total_games"] == 1.5
    assert report["team_averages"]["average_points"] == 18.5


@pytest.mark.asyncio
async def test_team_report_pdf(client, login, season):
    login("admin-1")

    response = await client.get("/api/v1/reports/team/Tigers", params={"format": "pdf"})

    assert response.status_code == 200
    assert 'filename="Tigers_Team_Report.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_team_report_requires_coach(client, login, season):
    login("user-1")

    response = await client.get("/api/v1/reports/team/Tigers")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_unknown_team_is_404(client, login):
    login("coach-1")

    response = await client.get("/api/v1/reports/team/Lions")

    assert response.status_code == 404


def test_content_disposition_keeps_ascii_fallback():
    header = content_disposition('Tigres "Élite"_Team_Report.pdf')

    assert header.startswith('attachment; filename="Tigres_lite__Team_Report.pdf"')
    assert "filename*=UTF-8''Tigres%20%22%C3%89lite%22_Team_Report.pdf" in header


@pytest.mark.asyncio
async def test_team_report_pdf_with_quoted_team_name(client, login, repository):
    name = 'Tigres "Élite"'
    repository.add(make_athlete(_id="athlete-3", user_id="user-2", team=TeamInfo(name=name)))
    login("admin-1")

    response = await client.get(f"/api/v1/reports/team/{quote(name, safe='')}", params={"format": "pdf"})

    assert response.status_code == 200
    assert "filename*=UTF-8''Tigres%20%22%C3%89lite%22_Team_Report.pdf" in response.headers["content-disposition"]
