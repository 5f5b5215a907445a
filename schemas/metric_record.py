"""Metric record (per game/session stats) collection schema."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from schemas.common import Document, UTCDatetime
from schemas.enums import GameType
from utils.helpers import safe_ratio


class BasketballStats(BaseModel):
    """Basketball box score counters."""
    model_config = ConfigDict(allow_inf_nan=False)
    sport: Literal["basketball"] = "basketball"
    points: float = 0
    field_goals_made: float = 0
    field_goals_attempted: float = 0
    three_pointers_made: float = 0
    three_pointers_attempted: float = 0
    free_throws_made: float = 0
    free_throws_attempted: float = 0
    rebounds: float = 0
    offensive_rebounds: float = 0
    defensive_rebounds: float = 0
    assists: float = 0
    steals: float = 0
    blocks: float = 0
    turnovers: float = 0
    personal_fouls: float = 0

    @computed_field
    @property
    def field_goal_percentage(self) -> float:
        return safe_ratio(self.field_goals_made, self.field_goals_attempted)

    @computed_field
    @property
    def three_point_percentage(self) -> float:
        return safe_ratio(self.three_pointers_made, self.three_pointers_attempted)

    @computed_field
    @property
    def free_throw_percentage(self) -> float:
        return safe_ratio(self.free_throws_made, self.free_throws_attempted)


class SoccerStats(BaseModel):
    """Soccer match counters."""
    model_config = ConfigDict(allow_inf_nan=False)
    sport: Literal["soccer"] = "soccer"
    goals: float = 0
    assists: float = 0
    shots: float = 0
    shots_on_goal: float = 0
    passes: float = 0
    passes_completed: float = 0
    tackles: float = 0
    interceptions: float = 0
    fouls: float = 0
    yellow_cards: float = 0
    red_cards: float = 0

    @computed_field
    @property
    def pass_accuracy(self) -> float:
        return safe_ratio(self.passes_completed, self.passes)


class FootballStats(BaseModel):
    """American football counters."""
    model_config = ConfigDict(allow_inf_nan=False)
    sport: Literal["football"] = "football"
    passing_yards: float = 0
    passing_attempts: float = 0
    passing_completions: float = 0
    passing_touchdowns: float = 0
    interceptions: float = 0
    rushing_yards: float = 0
    rushing_attempts: float = 0
    rushing_touchdowns: float = 0
    receiving_yards: float = 0
    receptions: float = 0
    receiving_touchdowns: float = 0
    tackles: float = 0
    sacks: float = 0
    forced_fumbles: float = 0

    @computed_field
    @property
    def pass_completion_percentage(self) -> float:
        return safe_ratio(self.passing_completions, self.passing_attempts)

    @property
    def touchdowns(self) -> float:
        return self.passing_touchdowns + self.rushing_touchdowns + self.receiving_touchdowns


class UntrackedStats(BaseModel):
    """Sports logged without a counter schema; only the tag is kept."""
    sport: Literal["baseball", "tennis", "swimming", "track", "volleyball"]


SportStats = Annotated[
    Union[BasketballStats, SoccerStats, FootballStats, UntrackedStats],
    Field(discriminator="sport"),
]


class PerformanceStats(BaseModel):
    """Fitness test results recorded alongside a session."""
    sprint_time: Optional[float] = None
    vertical_jump: Optional[float] = None
    agility_time: Optional[float] = None
    endurance_score: Optional[float] = None
    strength_score: Optional[float] = None
    flexibility_score: Optional[float] = None


class Weather(BaseModel):
    """Conditions for outdoor sessions."""
    temperature: Optional[float] = None
    conditions: Optional[str] = None
    wind_speed: Optional[float] = None


class MetricRecord(Document):
    """Metric record collection model: one dated game or session for one athlete."""
    athlete_id: str = Field(..., description="Athlete identifier")
    game_date: UTCDatetime = Field(..., description="Date of the game or session")
    game_type: GameType = Field(GameType.GAME, description="game, practice, scrimmage or tournament")
    stats: SportStats = Field(..., description="Sport-specific counters, tagged by sport")
    opponent: Optional[str] = None
    team_score: Optional[float] = None
    opponent_score: Optional[float] = None
    minutes_played: Optional[int] = Field(None, ge=0)
    performance: Optional[PerformanceStats] = None
    weather: Optional[Weather] = None
    notes: Optional[str] = Field(None, max_length=500)
    verified: bool = Field(False, description="Whether a coach or admin vouched for the entry")
    verified_by: Optional[str] = None
    verified_at: Optional[UTCDatetime] = None

    @property
    def sport(self) -> str:
        return self.stats.sport


class MetricRecordCreate(BaseModel):
    """Request body for logging a metric record."""
    athlete_id: Optional[str] = Field(None, description="Required when a coach or admin logs for an athlete")
    game_date: UTCDatetime
    game_type: GameType = GameType.GAME
    stats: SportStats
    opponent: Optional[str] = None
    team_score: Optional[float] = None
    opponent_score: Optional[float] = None
    minutes_played: Optional[int] = Field(None, ge=0)
    performance: Optional[PerformanceStats] = None
    weather: Optional[Weather] = None
    notes: Optional[str] = Field(None, max_length=500)


class MetricRecordUpdate(BaseModel):
    """Request body for editing a metric record; omitted fields are left alone."""
    game_date: Optional[UTCDatetime] = None
    game_type: Optional[GameType] = None
    stats: Optional[SportStats] = None
    opponent: Optional[str] = None
    team_score: Optional[float] = None
    opponent_score: Optional[float] = None
    minutes_played: Optional[int] = Field(None, ge=0)
    performance: Optional[PerformanceStats] = None
    weather: Optional[Weather] = None
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("game_date", "game_type", "stats")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value
