"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from users_manager.config import get_settings

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
        logger.info("MongoDB client created")
    return _mongo_client


async def close_connections():
    """Close the database connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        logger.info("MongoDB client closed")


async def get_database(db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """Get a MongoDB database by name (defaults to the configured one)."""
    client = await get_mongo_client()
    return client[db_name or get_settings().mongo_db_name]


async def get_users_collection() -> AsyncIOMotorCollection:
    """Get the collection holding every profile record."""
    db = await get_database()
    return db[get_settings().users_collection]
