"""Goal progress computation and lifecycle."""

from datetime import datetime
from typing import Iterable, List, Optional

from schemas.analytics import GoalAnalytics, GoalProgressSummary, RecentProgress
from schemas.enums import Direction, GoalStatus
from schemas.goal import CoachFeedback, Goal, GoalCreate, GoalUpdate, ProgressUpdate, TargetMetric
from utils.helpers import mean, round_half_up, utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)

RECENT_PROGRESS_LIMIT = 10


class InvalidTargetError(ValueError):
    """Raised when a goal's target value cannot anchor a percentage."""


def compute_percentage(target_metric: TargetMetric) -> int:
    """Progress toward the target as an integer in [0, 100].

    increase: current / target
    decrease: (target - current) / target
    maintain: 100 minus the relative distance from target
    """
    current = target_metric.current_value
    target = target_metric.target_value
    if target == 0:
        raise InvalidTargetError(f"Target value for '{target_metric.name}' must be non-zero")

    if target_metric.direction == Direction.INCREASE:
        percentage = current / target * 100
    elif target_metric.direction == Direction.DECREASE:
        percentage = (target - current) / target * 100
    else:
        percentage = 100 - abs(current - target) / target * 100

    return round_half_up(min(100.0, max(0.0, percentage)))


def update_progress(
    goal: Goal,
    new_value: float,
    notes: Optional[str],
    updater_id: Optional[str],
    now: Optional[datetime] = None,
) -> Goal:
    """Record a new value on a goal and return the updated copy.

    The input goal is left untouched. Completion is checked before the
    deadline, so a goal that reaches 100% after its target date still
    completes.
    """
    now = now or utcnow()
    updated = goal.model_copy(deep=True)

    updated.target_metric.current_value = new_value
    updated.progress.percentage = compute_percentage(updated.target_metric)
    updated.progress.updates.append(
        ProgressUpdate(date=now, value=new_value, notes=notes, updated_by=updater_id)
    )

    if updated.progress.percentage >= 100 and updated.status == GoalStatus.ACTIVE:
        updated.status = GoalStatus.COMPLETED.value
        updated.completed_at = now
    elif now > updated.target_date and updated.status == GoalStatus.ACTIVE:
        updated.status = GoalStatus.OVERDUE.value

    updated.updated_at = now
    return updated


async def record_progress(repository, goal: Goal, new_value: float, notes: Optional[str], updater_id: str) -> Goal:
    """Apply a progress update and persist it as one write."""
    updated = update_progress(goal, new_value, notes, updater_id)
    await repository.save_goal(updated)
    logger.info(
        f"Goal {goal.id} progress {goal.progress.percentage}% -> {updated.progress.percentage}% "
        f"(status {updated.status})"
    )
    return updated


def apply_edits(goal: Goal, edits: GoalUpdate, updater_id: str, now: Optional[datetime] = None) -> Goal:
    """Apply field edits; a new current value goes through the progress log."""
    now = now or utcnow()
    changes = edits.model_dump(exclude_unset=True, exclude={"current_value", "notes"})
    updated = Goal.model_validate({**goal.to_document(), **changes})

    if edits.current_value is not None:
        updated = update_progress(updated, edits.current_value, edits.notes, updater_id, now=now)

    updated.updated_at = now
    return updated


def add_feedback(
    goal: Goal,
    feedback: str,
    rating: Optional[int],
    coach_id: str,
    now: Optional[datetime] = None,
) -> Goal:
    """Append a coach feedback entry and return the updated copy."""
    now = now or utcnow()
    updated = goal.model_copy(deep=True)
    updated.coach_feedback.append(CoachFeedback(date=now, feedback=feedback, rating=rating, coach=coach_id))
    updated.updated_at = now
    return updated


def summarize_goals(goals: Iterable[Goal]) -> GoalProgressSummary:
    """Totals and rounded mean progress over a set of goals."""
    goals = list(goals)
    return GoalProgressSummary(
        total_goals=len(goals),
        active_goals=sum(1 for g in goals if g.status == GoalStatus.ACTIVE),
        completed_goals=sum(1 for g in goals if g.status == GoalStatus.COMPLETED),
        average_progress=round_half_up(mean(g.progress.percentage for g in goals)),
    )


def goal_analytics(goals: List[Goal]) -> GoalAnalytics:
    """Counts by status and category plus the most recently updated goals."""
    analytics = GoalAnalytics(
        total_goals=len(goals),
        active_goals=sum(1 for g in goals if g.status == GoalStatus.ACTIVE),
        completed_goals=sum(1 for g in goals if g.status == GoalStatus.COMPLETED),
        overdue_goals=sum(1 for g in goals if g.status == GoalStatus.OVERDUE),
        average_progress=mean(g.progress.percentage for g in goals),
    )

    for goal in goals:
        category = _value(goal.category)
        status = _value(goal.status)
        analytics.goals_by_category[category] = analytics.goals_by_category.get(category, 0) + 1
        analytics.goals_by_status[status] = analytics.goals_by_status.get(status, 0) + 1

    recent = [
        RecentProgress(
            title=g.title,
            progress=g.progress.percentage,
            last_update=g.progress.updates[-1].date,
        )
        for g in goals
        if g.progress.updates
    ]
    recent.sort(key=lambda item: item.last_update, reverse=True)
    analytics.recent_progress = recent[:RECENT_PROGRESS_LIMIT]
    return analytics


def _value(field) -> str:
    return getattr(field, "value", field)


def create_goal(data: GoalCreate, athlete_id: str, athlete_user_id: str, creator_id: str) -> Goal:
    """Build a new active goal from a creation request.

    The creator and the owning athlete both get edit and view rights.
    """
    holders = list(dict.fromkeys([creator_id, athlete_user_id]))
    goal = Goal(
        athlete_id=athlete_id,
        title=data.title,
        description=data.description,
        category=data.category,
        sport=data.sport,
        target_metric=data.target_metric,
        start_date=data.start_date or utcnow(),
        target_date=data.target_date,
        priority=data.priority,
        created_by=creator_id,
        tags=data.tags,
        permissions={"can_edit": holders, "can_view": list(holders)},
        progress={"milestones": [m.model_dump() for m in data.milestones]},
    )
    goal.progress.percentage = compute_percentage(goal.target_metric)
    return goal
