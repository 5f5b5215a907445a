"""Collection and API schemas organized by collection type."""

from schemas.enums import (
    AthleteSport,
    Direction,
    GameType,
    GoalCategory,
    GoalPriority,
    GoalSport,
    GoalStatus,
    Role,
    Sport,
)
from schemas.user import User
from schemas.athlete import Athlete, AthleteIdentity
from schemas.metric_record import MetricRecord, SportStats
from schemas.goal import Goal, TargetMetric
from schemas.analytics import AnalyticsSummary, GoalAnalytics, TeamAnalyticsSummary
from schemas.report import AthleteReport, ReportPeriod, TeamReport

__all__ = [
    "AthleteSport",
    "Direction",
    "GameType",
    "GoalCategory",
    "GoalPriority",
    "GoalSport",
    "GoalStatus",
    "Role",
    "Sport",
    "User",
    "Athlete",
    "AthleteIdentity",
    "MetricRecord",
    "SportStats",
    "Goal",
    "TargetMetric",
    "AnalyticsSummary",
    "GoalAnalytics",
    "TeamAnalyticsSummary",
    "AthleteReport",
    "ReportPeriod",
    "TeamReport",
]
