"""
Database definitions and collection constants.
"""
from users_manager.database.databases import users_db

__all__ = ["users_db"]
