"""Goal routes for goal management."""

import math
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, status
from api.dependencies import CurrentActor, RepositoryDep, require, resolve_target_athlete
from config.settings import settings
from schemas.analytics import GoalAnalytics
from schemas.enums import GoalCategory, GoalSport, GoalStatus
from schemas.goal import FeedbackRequest, Goal, GoalCreate, GoalUpdate, ProgressRequest
from services import policy
from services.goal_engine import (
    InvalidTargetError,
    add_feedback,
    apply_edits,
    create_goal,
    goal_analytics,
    record_progress,
)
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/v1/goals", tags=["goals"])


async def _load_goal(repository, goal_id: str) -> Goal:
    goal = await repository.get_goal(goal_id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


@router.post("/", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def create_new_goal(payload: GoalCreate, actor: CurrentActor, repository: RepositoryDep):
    """Create a goal for the caller, or for a named athlete when the caller is a coach or admin."""
    try:
        athlete = await resolve_target_athlete(actor, repository, payload.athlete_id)
        goal = create_goal(payload, athlete.id, athlete.user_id, actor.id)
        await repository.save_goal(goal)
        logger.info(f"Created goal {goal.id} for athlete {athlete.id} by {actor.role} {actor.id}")
        return goal
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating goal: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating goal: {str(e)}")


@router.get("/")
async def list_goals(
    actor: CurrentActor,
    repository: RepositoryDep,
    athlete_id: Optional[str] = Query(None, description="Athlete identifier (coaches/admins)"),
    goal_status: Optional[GoalStatus] = Query(None, alias="status"),
    category: Optional[GoalCategory] = None,
    sport: Optional[GoalSport] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.page_size_default, ge=1, le=100),
):
    """
    List goals, newest first.
    Athletes see their own goals; coaches see one athlete's or all of their athletes' goals.
    """
    try:
        if actor.is_athlete:
            athlete = await resolve_target_athlete(actor, repository, None)
            target = athlete.id
        else:
            require(policy.can_manage_for_others(actor))
            if athlete_id:
                target = athlete_id
            elif actor.is_coach:
                target = [a.id for a in await repository.find_athletes(coach_id=actor.id)]
            else:
                target = None

        filters = {
            "status": goal_status.value if goal_status else None,
            "category": category.value if category else None,
            "sport": sport.value if sport else None,
        }
        goals = await repository.find_goals(target, skip=(page - 1) * limit, limit=limit, **filters)
        total = await repository.count_goals(target, **filters)

        return {
            "goals": goals,
            "total_pages": math.ceil(total / limit),
            "current_page": page,
            "total": total,
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching goals: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching goals: {str(e)}")


@router.get("/analytics/progress", response_model=GoalAnalytics)
async def get_goal_analytics(
    actor: CurrentActor,
    repository: RepositoryDep,
    athlete_id: Optional[str] = Query(None, description="Athlete identifier (coaches/admins)"),
    category: Optional[GoalCategory] = None,
    sport: Optional[GoalSport] = None,
):
    """Goal progress analytics for one athlete."""
    try:
        if actor.is_athlete:
            target = (await resolve_target_athlete(actor, repository, None)).id
        else:
            require(policy.can_manage_for_others(actor))
            if not athlete_id:
                raise HTTPException(status_code=400, detail="Athlete ID required")
            target = athlete_id

        goals = await repository.find_goals(
            target,
            category=category.value if category else None,
            sport=sport.value if sport else None,
        )
        return goal_analytics(goals)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error computing goal analytics: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error computing goal analytics: {str(e)}")


@router.get("/{goal_id}", response_model=Goal)
async def get_goal(goal_id: str, actor: CurrentActor, repository: RepositoryDep):
    """Get a single goal."""
    try:
        goal = await _load_goal(repository, goal_id)
        athlete = await repository.get_athlete(goal.athlete_id)
        require(policy.can_view_goal(actor, goal, athlete))
        return goal
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching goal {goal_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching goal: {str(e)}")


@router.put("/{goal_id}", response_model=Goal)
async def update_goal(goal_id: str, payload: GoalUpdate, actor: CurrentActor, repository: RepositoryDep):
    """Edit goal fields. A new current value is logged as a progress update."""
    try:
        goal = await _load_goal(repository, goal_id)
        require(policy.can_edit_goal(actor, goal))

        updated = apply_edits(goal, payload, actor.id)
        await repository.save_goal(updated)
        logger.info(f"Updated goal {goal_id} by {actor.id}")
        return updated
    except HTTPException:
        raise
    except InvalidTargetError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating goal {goal_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error updating goal: {str(e)}")


@router.put("/{goal_id}/progress", response_model=Goal)
async def update_goal_progress(
    goal_id: str,
    payload: ProgressRequest,
    actor: CurrentActor,
    repository: RepositoryDep,
):
    """Record a new value for the goal's target metric."""
    try:
        goal = await _load_goal(repository, goal_id)
        require(policy.can_edit_goal(actor, goal))
        return await record_progress(repository, goal, payload.value, payload.notes, actor.id)
    except HTTPException:
        raise
    except InvalidTargetError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating progress for goal {goal_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error updating goal progress: {str(e)}")


@router.post("/{goal_id}/feedback", response_model=Goal)
async def add_coach_feedback(
    goal_id: str,
    payload: FeedbackRequest,
    actor: CurrentActor,
    repository: RepositoryDep,
):
    """Add coach feedback to a goal (the athlete's coach or an admin)."""
    try:
        require(policy.can_manage_for_others(actor), "Insufficient permissions")
        goal = await _load_goal(repository, goal_id)
        athlete = await repository.get_athlete(goal.athlete_id)
        if not athlete:
            raise HTTPException(status_code=404, detail="Athlete not found")
        require(policy.can_give_feedback(actor, athlete))

        updated = add_feedback(goal, payload.feedback, payload.rating, actor.id)
        await repository.save_goal(updated)
        logger.info(f"Coach {actor.id} left feedback on goal {goal_id}")
        return updated
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error adding feedback to goal {goal_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error adding coach feedback: {str(e)}")


@router.delete("/{goal_id}")
async def delete_goal(goal_id: str, actor: CurrentActor, repository: RepositoryDep):
    """Delete a goal (editors, the creator, or an admin)."""
    try:
        goal = await _load_goal(repository, goal_id)
        require(policy.can_delete_goal(actor, goal))
        await repository.delete_goal(goal_id)
        logger.info(f"Deleted goal {goal_id} by {actor.id}")
        return {"message": "Goal deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting goal {goal_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error deleting goal: {str(e)}")
