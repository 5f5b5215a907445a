"""Database models and connection setup."""

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING
from typing import Optional
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)


class Database:
    """Database connection manager."""
    
    client: Optional[AsyncIOMotorClient] = None


db = Database()


async def connect_to_mongo():
    """Create database connection."""
    db.client = AsyncIOMotorClient(settings.mongodb_url)
    logger.info(f"Connected to MongoDB: {settings.mongodb_url.split('@')[-1]}")


async def close_mongo_connection():
    """Close database connection."""
    if db.client:
        db.client.close()
        db.client = None
        logger.info("Disconnected from MongoDB")


async def init_mongo():
    """Initialize MongoDB connection and all collections with indexes."""
    await connect_to_mongo()
    
    database = get_database()
    
    # Users collection
    await database.users.create_index([("email", ASCENDING)], unique=True, sparse=True)
    
    # Athletes collection
    athletes_collection = database.athletes
    await athletes_collection.create_index([("user_id", ASCENDING)], unique=True)
    await athletes_collection.create_index([("user_id", ASCENDING), ("sport", ASCENDING)])
    await athletes_collection.create_index([("coach_id", ASCENDING)])
    await athletes_collection.create_index([("team.name", ASCENDING)])
    
    # Metric records collection
    metric_records_collection = database.metric_records
    await metric_records_collection.create_index([("athlete_id", ASCENDING), ("game_date", DESCENDING)])
    await metric_records_collection.create_index([("stats.sport", ASCENDING), ("game_date", DESCENDING)])
    await metric_records_collection.create_index([("game_date", DESCENDING)])
    
    # Goals collection
    goals_collection = database.goals
    await goals_collection.create_index(
        [("athlete_id", ASCENDING), ("status", ASCENDING), ("target_date", ASCENDING)]
    )
    await goals_collection.create_index([("created_by", ASCENDING), ("status", ASCENDING)])
    await goals_collection.create_index([("target_date", ASCENDING)])
    
    logger.info("MongoDB initialized: All collections created with indexes")


def get_database():
    """Get database instance."""
    return db.client[settings.mongodb_url.rsplit("/", 1)[-1].split("?")[0]]


# Helper functions to get collections
def get_users_collection():
    """Get users collection."""
    return get_database().users


def get_athletes_collection():
    """Get athletes collection."""
    return get_database().athletes


def get_metric_records_collection():
    """Get metric records collection."""
    return get_database().metric_records


def get_goals_collection():
    """Get goals collection."""
    return get_database().goals
