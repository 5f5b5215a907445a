"""Goal collection schema."""

import math
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from schemas.common import Document, Schema, UTCDatetime
from schemas.enums import (
    Direction,
    GoalCategory,
    GoalPriority,
    GoalSport,
    GoalStatus,
    ReminderFrequency,
)
from utils.helpers import utcnow


class TargetMetric(Schema):
    """The single value a goal tracks."""
    name: str = Field(..., min_length=1, description="Metric name, e.g. free throw percentage")
    unit: str = Field(..., min_length=1, description="Unit of measurement")
    current_value: float = Field(0, allow_inf_nan=False, description="Latest recorded value")
    target_value: float = Field(..., allow_inf_nan=False, description="Value that completes the goal")
    direction: Direction = Field(Direction.INCREASE, description="increase, decrease or maintain")


class Milestone(Schema):
    """Intermediate checkpoint on the way to the target."""
    title: str
    target_value: Optional[float] = None
    achieved_value: Optional[float] = None
    achieved: bool = False
    achieved_date: Optional[UTCDatetime] = None
    notes: Optional[str] = None


class ProgressUpdate(Schema):
    """One entry in a goal's append-only update log."""
    date: UTCDatetime = Field(default_factory=utcnow)
    value: float = Field(..., allow_inf_nan=False)
    notes: Optional[str] = None
    updated_by: Optional[str] = None


class Progress(Schema):
    """Computed progress plus its history."""
    percentage: int = Field(0, ge=0, le=100)
    milestones: List[Milestone] = Field(default_factory=list)
    updates: List[ProgressUpdate] = Field(default_factory=list)


class Permissions(Schema):
    """User ids allowed to edit or view a goal."""
    can_edit: List[str] = Field(default_factory=list)
    can_view: List[str] = Field(default_factory=list)


class Reminders(Schema):
    """Reminder schedule for a goal."""
    enabled: bool = True
    frequency: ReminderFrequency = ReminderFrequency.WEEKLY
    last_reminder: Optional[UTCDatetime] = None
    next_reminder: Optional[UTCDatetime] = None


class CoachFeedback(Schema):
    """Rated feedback left on a goal by a coach."""
    date: UTCDatetime = Field(default_factory=utcnow)
    feedback: str
    rating: Optional[int] = Field(None, ge=1, le=5)
    coach: str


class Goal(Document):
    """Goal collection model."""
    athlete_id: str = Field(..., description="Owning athlete identifier")
    title: str = Field(..., max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    category: GoalCategory
    sport: GoalSport
    target_metric: TargetMetric
    start_date: UTCDatetime = Field(default_factory=utcnow)
    target_date: UTCDatetime
    status: GoalStatus = GoalStatus.ACTIVE
    priority: GoalPriority = GoalPriority.MEDIUM
    progress: Progress = Field(default_factory=Progress)
    created_by: str = Field(..., description="User who created the goal")
    permissions: Permissions = Field(default_factory=Permissions)
    reminders: Reminders = Field(default_factory=Reminders)
    tags: List[str] = Field(default_factory=list)
    completed_at: Optional[UTCDatetime] = None
    completion_notes: Optional[str] = None
    coach_feedback: List[CoachFeedback] = Field(default_factory=list)

    @computed_field
    @property
    def days_remaining(self) -> int:
        remaining = (self.target_date - utcnow()).total_seconds() / 86400
        return max(0, math.ceil(remaining))

    @computed_field
    @property
    def is_overdue(self) -> bool:
        return self.status == GoalStatus.ACTIVE and utcnow() > self.target_date


class GoalCreate(BaseModel):
    """Request body for creating a goal."""
    athlete_id: Optional[str] = Field(None, description="Required when a coach or admin creates the goal")
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    category: GoalCategory
    sport: GoalSport
    target_metric: TargetMetric
    start_date: Optional[UTCDatetime] = None
    target_date: UTCDatetime
    priority: GoalPriority = GoalPriority.MEDIUM
    milestones: List[Milestone] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("target_metric")
    @classmethod
    def reject_zero_target(cls, value: TargetMetric) -> TargetMetric:
        if value.target_value == 0:
            raise ValueError("target_value must be non-zero")
        return value


class GoalUpdate(BaseModel):
    """Request body for editing a goal; omitted fields are left alone."""
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    target_date: Optional[UTCDatetime] = None
    priority: Optional[GoalPriority] = None
    status: Optional[GoalStatus] = None
    tags: Optional[List[str]] = None
    reminders: Optional[Reminders] = None
    current_value: Optional[float] = Field(None, allow_inf_nan=False, description="Recorded through the progress log")
    notes: Optional[str] = None

    @field_validator("title", "target_date", "priority", "status", "tags", "reminders")
    @classmethod
    def reject_null(cls, value):
        # may be omitted, but a stored goal always has a value for these
        if value is None:
            raise ValueError("field cannot be null")
        return value


class ProgressRequest(BaseModel):
    """Request body for a progress update."""
    value: float = Field(..., allow_inf_nan=False)
    notes: Optional[str] = None

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value


class FeedbackRequest(BaseModel):
    """Request body for coach feedback."""
    feedback: str = Field(..., min_length=1)
    rating: Optional[int] = Field(None, ge=1, le=5)

    @field_validator("feedback")
    @classmethod
    def strip_feedback(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("feedback must not be blank")
        return value
