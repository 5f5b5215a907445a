"""Enums for collection fields."""

from enum import Enum


class Role(str, Enum):
    """User role enum."""
    ATHLETE = "athlete"
    COACH = "coach"
    ADMIN = "admin"


class Sport(str, Enum):
    """Sports a metric record can be tagged with."""
    BASKETBALL = "basketball"
    SOCCER = "soccer"
    FOOTBALL = "football"
    BASEBALL = "baseball"
    TENNIS = "tennis"
    SWIMMING = "swimming"
    TRACK = "track"
    VOLLEYBALL = "volleyball"


class AthleteSport(str, Enum):
    """Primary sport on an athlete profile."""
    BASKETBALL = "basketball"
    SOCCER = "soccer"
    FOOTBALL = "football"
    BASEBALL = "baseball"
    TENNIS = "tennis"
    SWIMMING = "swimming"
    TRACK = "track"
    VOLLEYBALL = "volleyball"
    OTHER = "other"


class GoalSport(str, Enum):
    """Sport a goal belongs to."""
    BASKETBALL = "basketball"
    SOCCER = "soccer"
    FOOTBALL = "football"
    BASEBALL = "baseball"
    TENNIS = "tennis"
    SWIMMING = "swimming"
    TRACK = "track"
    VOLLEYBALL = "volleyball"
    GENERAL = "general"


class GameType(str, Enum):
    """Kind of session a metric record was logged for."""
    GAME = "game"
    PRACTICE = "practice"
    SCRIMMAGE = "scrimmage"
    TOURNAMENT = "tournament"


class GoalCategory(str, Enum):
    """Goal category enum."""
    PERFORMANCE = "performance"
    FITNESS = "fitness"
    SKILL = "skill"
    TEAM = "team"
    PERSONAL = "personal"
    ACADEMIC = "academic"


class GoalStatus(str, Enum):
    """Goal lifecycle status."""
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"


class GoalPriority(str, Enum):
    """Goal priority enum."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Direction(str, Enum):
    """Which way a target metric has to move for the goal to progress."""
    INCREASE = "increase"
    DECREASE = "decrease"
    MAINTAIN = "maintain"


class ReminderFrequency(str, Enum):
    """Goal reminder frequency enum."""
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class TeamLevel(str, Enum):
    """Competitive level of an athlete's team."""
    RECREATIONAL = "recreational"
    COMPETITIVE = "competitive"
    ELITE = "elite"
    PROFESSIONAL = "professional"
