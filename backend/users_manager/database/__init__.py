"""
Database module - MongoDB connection and database definitions.
"""
from users_manager.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
    get_users_collection,
)
from users_manager.database.databases import users_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "get_users_collection",
    "users_db",
]
