"""Athlete profile routes."""

from datetime import timedelta
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from api.dependencies import (
    CurrentActor,
    RepositoryDep,
    get_own_athlete,
    require,
    require_coach_or_admin,
)
from config.settings import settings
from schemas.athlete import Athlete, AthleteProfileUpdate
from schemas.enums import GoalStatus
from services import policy
from services.analytics import summarize
from services.policy import Actor
from utils.helpers import utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/v1/athletes", tags=["athletes"])


@router.get("/me", response_model=Athlete)
async def get_my_profile(athlete: Athlete = Depends(get_own_athlete)):
    """Get the caller's athlete profile."""
    return athlete


@router.put("/me", response_model=Athlete)
async def update_my_profile(
    payload: AthleteProfileUpdate,
    repository: RepositoryDep,
    athlete: Athlete = Depends(get_own_athlete),
):
    """Update sport, position, body measurements or team on the caller's profile."""
    try:
        changes = payload.model_dump(exclude_unset=True)
        updated = Athlete.model_validate({**athlete.to_document(), **changes})
        await repository.save_athlete(updated)
        logger.info(f"Updated athlete profile {athlete.id}: {sorted(changes)}")
        return updated
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating athlete profile {athlete.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error updating athlete profile: {str(e)}")


@router.get("/me/summary")
async def get_my_summary(repository: RepositoryDep, athlete: Athlete = Depends(get_own_athlete)):
    """
    Dashboard summary: records from the last summary_window_days days,
    the ten most recent of them, and the athlete's active goals.
    """
    try:
        since = utcnow() - timedelta(days=settings.summary_window_days)
        records = await repository.find_metric_records(athlete.id, start_date=since, newest_first=True)
        active_goals = await repository.find_goals(athlete.id, status=GoalStatus.ACTIVE.value)

        return {
            "recent_stats": records[: settings.recent_games_limit],
            "active_goals": active_goals,
            "averages": summarize(records, athlete.sport),
            "total_games": len(records),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error building summary for athlete {athlete.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error building athlete summary: {str(e)}")


@router.get("/")
async def list_athletes(
    repository: RepositoryDep,
    actor: Actor = Depends(require_coach_or_admin),
    team: Optional[str] = Query(None, description="Team name"),
):
    """List athletes; coaches only see the athletes assigned to them."""
    try:
        coach_id = actor.id if actor.is_coach else None
        athletes = await repository.find_athletes(coach_id=coach_id, team_name=team)
        return {"athletes": athletes, "total": len(athletes)}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching athletes: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching athletes: {str(e)}")


@router.get("/{athlete_id}", response_model=Athlete)
async def get_athlete(athlete_id: str, actor: CurrentActor, repository: RepositoryDep):
    """Get an athlete profile (the athlete, their coach, a parent, or an admin)."""
    try:
        athlete = await repository.get_athlete(athlete_id)
        if not athlete:
            raise HTTPException(status_code=404, detail="Athlete not found")
        require(policy.can_access_athlete(actor, athlete))
        return athlete
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching athlete {athlete_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching athlete: {str(e)}")
