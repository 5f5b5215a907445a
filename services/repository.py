"""MongoDB persistence for users, athletes, metric records and goals."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from pymongo import ASCENDING, DESCENDING

from models.database import (
    get_athletes_collection,
    get_goals_collection,
    get_metric_records_collection,
    get_users_collection,
)
from schemas.athlete import Athlete
from schemas.goal import Goal
from schemas.metric_record import MetricRecord
from schemas.user import User
from utils.helpers import utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)


def metric_record_query(
    athlete_id: Optional[str] = None,
    sport: Optional[str] = None,
    game_type: Optional[str] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build the MongoDB filter for metric record lookups."""
    query: Dict[str, Any] = {}
    if athlete_id:
        query["athlete_id"] = athlete_id
    if sport:
        query["stats.sport"] = sport
    if game_type:
        query["game_type"] = game_type
    if start_date or end_date:
        query["game_date"] = {}
        if start_date:
            query["game_date"]["$gte"] = start_date
        if end_date:
            query["game_date"]["$lte"] = end_date
    return query


def goal_query(
    athlete_id: Union[str, Sequence[str], None] = None,
    status: Optional[str] = None,
    category: Optional[str] = None,
    sport: Optional[str] = None,
    active_between: Optional[tuple] = None,
) -> Dict[str, Any]:
    """Build the MongoDB filter for goal lookups.

    ``athlete_id`` may be a list to match any of several athletes.
    ``active_between`` is a (start, end) window; goals that started before
    the end or are due after the start match.
    """
    query: Dict[str, Any] = {}
    if isinstance(athlete_id, (list, tuple, set)):
        query["athlete_id"] = {"$in": list(athlete_id)}
    elif athlete_id:
        query["athlete_id"] = athlete_id
    if status:
        query["status"] = status
    if category:
        query["category"] = category
    if sport:
        query["sport"] = sport
    if active_between:
        start, end = active_between
        query["$or"] = [
            {"start_date": {"$lte": end}},
            {"target_date": {"$gte": start}},
        ]
    return query


class Repository:
    """Find/save/delete by query over the application's collections."""

    # Users

    async def get_user(self, user_id: str) -> Optional[User]:
        document = await get_users_collection().find_one({"_id": user_id})
        return User.model_validate(document) if document else None

    # Athletes

    async def get_athlete(self, athlete_id: str) -> Optional[Athlete]:
        document = await get_athletes_collection().find_one({"_id": athlete_id})
        return Athlete.model_validate(document) if document else None

    async def get_athlete_by_user(self, user_id: str) -> Optional[Athlete]:
        document = await get_athletes_collection().find_one({"user_id": user_id})
        return Athlete.model_validate(document) if document else None

    async def find_athletes(
        self,
        coach_id: Optional[str] = None,
        team_name: Optional[str] = None,
    ) -> List[Athlete]:
        query: Dict[str, Any] = {}
        if coach_id:
            query["coach_id"] = coach_id
        if team_name:
            query["team.name"] = team_name
        cursor = get_athletes_collection().find(query).sort("created_at", ASCENDING)
        return [Athlete.model_validate(doc) for doc in await cursor.to_list(length=None)]

    async def save_athlete(self, athlete: Athlete) -> Athlete:
        athlete.updated_at = utcnow()
        await get_athletes_collection().replace_one({"_id": athlete.id}, athlete.to_document(), upsert=True)
        return athlete

    # Metric records

    async def find_metric_records(
        self,
        athlete_id: str,
        sport: Optional[str] = None,
        game_type: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        newest_first: bool = False,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[MetricRecord]:
        query = metric_record_query(athlete_id, sport, game_type, start_date, end_date)
        cursor = get_metric_records_collection().find(query).sort(
            "game_date", DESCENDING if newest_first else ASCENDING
        )
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return [MetricRecord.model_validate(doc) for doc in await cursor.to_list(length=None)]

    async def count_metric_records(self, athlete_id: str, **filters) -> int:
        return await get_metric_records_collection().count_documents(metric_record_query(athlete_id, **filters))

    async def get_metric_record(self, record_id: str) -> Optional[MetricRecord]:
        document = await get_metric_records_collection().find_one({"_id": record_id})
        return MetricRecord.model_validate(document) if document else None

    async def insert_metric_record(self, record: MetricRecord) -> MetricRecord:
        await get_metric_records_collection().insert_one(record.to_document())
        return record

    async def save_metric_record(self, record: MetricRecord) -> MetricRecord:
        record.updated_at = utcnow()
        await get_metric_records_collection().replace_one({"_id": record.id}, record.to_document(), upsert=True)
        return record

    async def delete_metric_record(self, record_id: str) -> bool:
        result = await get_metric_records_collection().delete_one({"_id": record_id})
        return result.deleted_count > 0

    # Goals

    async def find_goals(
        self,
        athlete_id: Union[str, Sequence[str], None] = None,
        status: Optional[str] = None,
        category: Optional[str] = None,
        sport: Optional[str] = None,
        active_between: Optional[tuple] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Goal]:
        query = goal_query(athlete_id, status, category, sport, active_between)
        cursor = get_goals_collection().find(query).sort("created_at", DESCENDING)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return [Goal.model_validate(doc) for doc in await cursor.to_list(length=None)]

    async def count_goals(self, athlete_id: Union[str, Sequence[str], None] = None, **filters) -> int:
        return await get_goals_collection().count_documents(goal_query(athlete_id, **filters))

    async def get_goal(self, goal_id: str) -> Optional[Goal]:
        document = await get_goals_collection().find_one({"_id": goal_id})
        return Goal.model_validate(document) if document else None

    async def save_goal(self, goal: Goal) -> Goal:
        """Write the whole goal document in one replace; concurrent writers race, last one wins."""
        await get_goals_collection().replace_one({"_id": goal.id}, goal.to_document(), upsert=True)
        return goal

    async def delete_goal(self, goal_id: str) -> bool:
        result = await get_goals_collection().delete_one({"_id": goal_id})
        return result.deleted_count > 0


repository = Repository()


def get_repository() -> Repository:
    """FastAPI dependency returning the shared repository."""
    return repository
