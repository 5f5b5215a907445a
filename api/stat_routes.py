"""Routes for logging and reading per-game metric records."""

import math
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, status
from api.dependencies import CurrentActor, RepositoryDep, require, resolve_target_athlete
from config.settings import settings
from schemas.enums import GameType, Sport
from schemas.metric_record import MetricRecord, MetricRecordCreate, MetricRecordUpdate
from services import policy
from services.analytics import summarize, trend_data
from utils.helpers import to_naive_utc, utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/v1/stats", tags=["stats"])


async def _load_record(repository, record_id: str):
    """Fetch a record together with the athlete it belongs to."""
    record = await repository.get_metric_record(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Stats not found")
    athlete = await repository.get_athlete(record.athlete_id)
    if not athlete:
        raise HTTPException(status_code=404, detail="Athlete not found")
    return record, athlete


@router.post("/", response_model=MetricRecord, status_code=status.HTTP_201_CREATED)
async def add_stats(payload: MetricRecordCreate, actor: CurrentActor, repository: RepositoryDep):
    """
    Log a game or session.
    Entries made by a coach or admin are marked verified.
    """
    try:
        athlete = await resolve_target_athlete(actor, repository, payload.athlete_id)
        if not actor.is_athlete:
            require(policy.can_manage_record(actor, athlete))

        record = MetricRecord(athlete_id=athlete.id, **payload.model_dump(exclude={"athlete_id"}))
        if policy.can_manage_for_others(actor):
            record.verified = True
            record.verified_by = actor.id
            record.verified_at = utcnow()

        await repository.insert_metric_record(record)
        logger.info(f"Logged {record.sport} stats {record.id} for athlete {athlete.id}")
        return record
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error adding stats: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error adding stats: {str(e)}")


@router.get("/")
async def list_stats(
    actor: CurrentActor,
    repository: RepositoryDep,
    athlete_id: Optional[str] = Query(None, description="Athlete identifier (coaches/admins)"),
    sport: Optional[Sport] = None,
    game_type: Optional[GameType] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.page_size_default, ge=1, le=100),
):
    """List an athlete's records, newest game first."""
    try:
        athlete = await resolve_target_athlete(actor, repository, athlete_id)
        require(policy.can_manage_record(actor, athlete))

        filters = {
            "sport": sport.value if sport else None,
            "game_type": game_type.value if game_type else None,
            "start_date": to_naive_utc(start_date) if start_date else None,
            "end_date": to_naive_utc(end_date) if end_date else None,
        }
        records = await repository.find_metric_records(
            athlete.id, newest_first=True, skip=(page - 1) * limit, limit=limit, **filters
        )
        total = await repository.count_metric_records(athlete.id, **filters)

        return {
            "stats": records,
            "total_pages": math.ceil(total / limit),
            "current_page": page,
            "total": total,
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching stats: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching stats: {str(e)}")


@router.get("/analytics/performance")
async def get_performance_analytics(
    actor: CurrentActor,
    repository: RepositoryDep,
    athlete_id: Optional[str] = Query(None, description="Athlete identifier (coaches/admins)"),
    sport: Optional[Sport] = Query(None, description="Defaults to the athlete's sport"),
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
):
    """Sport summary and chart points over the athlete's records, oldest first."""
    try:
        athlete = await resolve_target_athlete(actor, repository, athlete_id)
        require(policy.can_manage_record(actor, athlete))

        sport_name = sport.value if sport else athlete.sport
        records = await repository.find_metric_records(
            athlete.id,
            sport=sport_name,
            start_date=to_naive_utc(start_date) if start_date else None,
            end_date=to_naive_utc(end_date) if end_date else None,
        )

        return {
            "summary": summarize(records, sport_name),
            "trend_data": list(trend_data(records)),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error computing performance analytics: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error computing performance analytics: {str(e)}")


@router.get("/{record_id}", response_model=MetricRecord)
async def get_stats(record_id: str, actor: CurrentActor, repository: RepositoryDep):
    try:
        record, athlete = await _load_record(repository, record_id)
        require(policy.can_manage_record(actor, athlete))
        return record
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching stats {record_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching stats: {str(e)}")


@router.put("/{record_id}", response_model=MetricRecord)
async def update_stats(
    record_id: str,
    payload: MetricRecordUpdate,
    actor: CurrentActor,
    repository: RepositoryDep,
):
    """Edit a record; omitted fields keep their stored values."""
    try:
        record, athlete = await _load_record(repository, record_id)
        require(policy.can_manage_record(actor, athlete))

        changes = payload.model_dump(exclude_unset=True)
        updated = MetricRecord.model_validate({**record.to_document(), **changes})
        await repository.save_metric_record(updated)
        logger.info(f"Updated stats {record_id} by {actor.id}")
        return updated
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating stats {record_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error updating stats: {str(e)}")


@router.delete("/{record_id}")
async def delete_stats(record_id: str, actor: CurrentActor, repository: RepositoryDep):
    try:
        _, athlete = await _load_record(repository, record_id)
        require(policy.can_manage_record(actor, athlete))
        await repository.delete_metric_record(record_id)
        logger.info(f"Deleted stats {record_id} by {actor.id}")
        return {"message": "Stats deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting stats {record_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error deleting stats: {str(e)}")
