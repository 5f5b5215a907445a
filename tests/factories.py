"""
Model factories for creating valid test data.

Every factory produces a valid schema instance. Override any field via kwargs.
"""

from datetime import datetime, timedelta

from schemas.athlete import Athlete, TeamInfo
from schemas.goal import Goal, TargetMetric
from schemas.metric_record import BasketballStats, FootballStats, MetricRecord, SoccerStats
from schemas.user import User
from utils.helpers import utcnow


def _days_from_now(days: int) -> datetime:
    return utcnow() + timedelta(days=days)


def make_user(**overrides) -> User:
    defaults = {
        "_id": "user-1",
        "first_name": "Alex",
        "last_name": "Rivera",
        "email": "alex@example.com",
        "role": "athlete",
    }
    defaults.update(overrides)
    return User(**defaults)


def make_athlete(**overrides) -> Athlete:
    defaults = {
        "_id": "athlete-1",
        "user_id": "user-1",
        "sport": "basketball",
        "position": "Guard",
        "age": 17,
        "team": TeamInfo(name="Tigers", level="competitive", season="2026"),
        "coach_id": "coach-1",
    }
    defaults.update(overrides)
    return Athlete(**defaults)


def make_basketball(game_date: datetime, opponent: str = "Hawks", **stats) -> MetricRecord:
    athlete_id = stats.pop("athlete_id", "athlete-1")
    return MetricRecord(
        athlete_id=athlete_id,
        game_date=game_date,
        opponent=opponent,
        stats=BasketballStats(**stats),
    )


def make_soccer(game_date: datetime, **stats) -> MetricRecord:
    athlete_id = stats.pop("athlete_id", "athlete-1")
    return MetricRecord(athlete_id=athlete_id, game_date=game_date, stats=SoccerStats(**stats))


def make_football(game_date: datetime, **stats) -> MetricRecord:
    athlete_id = stats.pop("athlete_id", "athlete-1")
    return MetricRecord(athlete_id=athlete_id, game_date=game_date, stats=FootballStats(**stats))


def make_goal(**overrides) -> Goal:
    metric = {
        "name": "Points per game",
        "unit": "points",
        "current_value": 0,
        "target_value": 50,
        "direction": "increase",
    }
    metric.update(overrides.pop("target_metric", {}))
    defaults = {
        "athlete_id": "athlete-1",
        "title": "Score more",
        "category": "performance",
        "sport": "basketball",
        "target_metric": TargetMetric(**metric),
        "start_date": _days_from_now(-10),
        "target_date": _days_from_now(30),
        "created_by": "user-1",
        "permissions": {"can_edit": ["user-1"], "can_view": ["user-1"]},
    }
    defaults.update(overrides)
    return Goal(**defaults)
