"""
Users database configuration.
Stores user and administrator profiles in a single flat collection.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

DB_NAME = "users_manager"


class Collections:
    """Collection names in users_manager."""
    USERS = "users"


class Fields:
    """Record field names shared by every profile variant."""
    ID = "_id"
    TYPE = "P_TYPE"
    EMAIL = "P_EMAIL"
    USERNAME = "P_USERNAME"
    PASSWORD = "P_PASSWORD"
    NAME = "P_NAME"
    LASTNAME = "P_LASTNAME"
    TELEPHONE = "P_TELEPHONE"
    # User only
    GENDER = "U_GENDER"
    CARD = "U_CARD"
    # Administrator only
    CURRENT_ACCOUNT = "A_CURRENT_ACCOUNT"


async def create_indexes(db: AsyncIOMotorDatabase, collection_name: str = Collections.USERS) -> None:
    """Create the unique credential indexes on the users collection."""
    users = db[collection_name]
    await users.create_index(Fields.EMAIL, unique=True)
    await users.create_index(Fields.USERNAME, unique=True)
