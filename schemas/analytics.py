"""Analytics summary schemas."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class BestGame(BaseModel):
    """Snapshot of the record with the highest primary counter."""
    record_id: Optional[str] = None
    date: Optional[datetime] = None
    opponent: Optional[str] = None
    points: float = 0


class AnalyticsSummary(BaseModel):
    """Per-sport statistics over a set of metric records.

    Only ``total_games`` is always present; the remaining fields are filled
    for the sports that define them and left as None otherwise.
    """
    total_games: int = 0

    # basketball
    average_points: Optional[float] = None
    average_rebounds: Optional[float] = None
    average_assists: Optional[float] = None
    average_field_goal_percentage: Optional[float] = None
    average_three_point_percentage: Optional[float] = None
    average_free_throw_percentage: Optional[float] = None
    best_game: Optional[BestGame] = None

    # soccer
    total_goals: Optional[float] = None
    total_assists: Optional[float] = None
    average_pass_accuracy: Optional[float] = None
    average_shots: Optional[float] = None

    # football
    total_passing_yards: Optional[float] = None
    total_rushing_yards: Optional[float] = None
    total_receiving_yards: Optional[float] = None
    total_touchdowns: Optional[float] = None
    average_pass_completion_percentage: Optional[float] = None


class TrendPoint(BaseModel):
    """One chart point per record."""
    date: datetime
    points: float = 0
    rebounds: float = 0
    assists: float = 0
    goals: float = 0
    pass_accuracy: float = 0


class GoalProgressSummary(BaseModel):
    """Goal rollup for one athlete."""
    total_goals: int = 0
    active_goals: int = 0
    completed_goals: int = 0
    average_progress: int = 0


class RecentProgress(BaseModel):
    title: str
    progress: int
    last_update: datetime


class GoalAnalytics(BaseModel):
    """Goal progress analytics for one athlete."""
    total_goals: int = 0
    active_goals: int = 0
    completed_goals: int = 0
    overdue_goals: int = 0
    average_progress: float = 0
    goals_by_category: Dict[str, int] = Field(default_factory=dict)
    goals_by_status: Dict[str, int] = Field(default_factory=dict)
    recent_progress: List[RecentProgress] = Field(default_factory=list)


class AthleteGoals(BaseModel):
    total: int = 0
    average_progress: int = 0


class AthleteSummary(BaseModel):
    """One athlete's line in a team report."""
    name: str
    position: Optional[str] = None
    total_games: int = 0
    analytics: AnalyticsSummary = Field(default_factory=AnalyticsSummary)
    goals: AthleteGoals = Field(default_factory=AthleteGoals)


class TeamAnalyticsSummary(BaseModel):
    """Per-athlete summaries rolled up to team level."""
    total_games: float = 0
    average_goal_progress: float = 0

    # basketball
    average_points: Optional[float] = None
    average_rebounds: Optional[float] = None
    average_assists: Optional[float] = None

    # soccer
    total_goals: Optional[float] = None
    total_assists: Optional[float] = None

    # football
    total_passing_yards: Optional[float] = None
    total_rushing_yards: Optional[float] = None
    total_touchdowns: Optional[float] = None
