"""Report schemas handed to the rendering collaborator."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from schemas.analytics import AnalyticsSummary, AthleteSummary, GoalProgressSummary, TeamAnalyticsSummary
from schemas.athlete import AthleteIdentity
from schemas.metric_record import MetricRecord


class ReportPeriod(BaseModel):
    start_date: datetime
    end_date: datetime
    generated_at: datetime


class ReportStats(BaseModel):
    total_games: int = 0
    analytics: AnalyticsSummary
    recent_games: List[MetricRecord] = Field(default_factory=list)


class ReportGoals(BaseModel):
    total: int = 0
    active: int = 0
    completed: int = 0
    overdue: int = 0
    progress: GoalProgressSummary


class AthleteReport(BaseModel):
    """Everything an athlete progress report shows."""
    athlete: AthleteIdentity
    report_period: ReportPeriod
    stats: ReportStats
    goals: ReportGoals
    summary: str = ""


class TeamHeader(BaseModel):
    name: str
    athlete_count: int
    sport: str


class TeamReport(BaseModel):
    """Team progress report for coaches."""
    team: TeamHeader
    report_period: ReportPeriod
    athletes: List[AthleteSummary] = Field(default_factory=list)
    team_averages: TeamAnalyticsSummary
