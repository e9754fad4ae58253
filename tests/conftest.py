"""
Global test fixtures for users_manager.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Users collection with the unique credential indexes
- Seed records as loaded by the provisioning script
- Profile factories
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Seed Data
# =============================================================================

SEED_RECORDS = [
    {
        "P_EMAIL": "admin@sandia.com",
        "P_USERNAME": "admin",
        "P_PASSWORD": "Ab123456",
        "P_NAME": "Admin",
        "P_LASTNAME": "Sandia",
        "P_TELEPHONE": "123456789",
        "A_CURRENT_ACCOUNT": "1234123412341234",
    },
    {
        "P_EMAIL": "user1@sandia.com",
        "P_USERNAME": "user1",
        "P_PASSWORD": "Ab123456",
        "P_NAME": "User 1",
        "P_LASTNAME": "Sandia",
        "P_TELEPHONE": "987654321",
        "U_GENDER": "MALE",
        "U_CARD": "4321432143214321",
    },
    {
        "P_EMAIL": "user2@sandia.com",
        "P_USERNAME": "user2",
        "P_PASSWORD": "Ab123456",
        "P_NAME": "User 2",
        "P_LASTNAME": "Sandia",
        "P_TELEPHONE": "987867321",
        "U_GENDER": "FEMALE",
        "U_CARD": "4321432337914321",
    },
    {
        "P_EMAIL": "user3@sandia.com",
        "P_USERNAME": "user3",
        "P_PASSWORD": "Ab123456",
        "P_NAME": "User 3",
        "P_LASTNAME": "Sandia",
        "P_TELEPHONE": "687864451",
        "U_GENDER": "OTHER",
        "U_CARD": "4305332143214321",
    },
]


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_users_db(mock_async_mongo_client):
    """Provide mock users_manager database with the real indexes."""
    from users_manager.database.databases import users_db

    db = mock_async_mongo_client[users_db.DB_NAME]
    await users_db.create_indexes(db)
    yield db


@pytest_asyncio.fixture
async def users_collection(mock_users_db):
    """Empty users collection."""
    from users_manager.database.databases.users_db import Collections

    yield mock_users_db[Collections.USERS]


@pytest_asyncio.fixture
async def seeded_collection(users_collection):
    """Users collection holding the seed records (untagged, as provisioned)."""
    await users_collection.insert_many([dict(record) for record in SEED_RECORDS])
    yield users_collection


# =============================================================================
# Profile Fixtures
# =============================================================================

@pytest.fixture
def make_user():
    """Factory for User profiles with unique defaults."""
    from users_manager.models import Gender, User

    def _make(suffix: str = "new", **overrides) -> User:
        data = {
            "email": f"{suffix}@example.com",
            "username": suffix,
            "password": "Secret123",
            "name": "Test",
            "lastname": "User",
            "telephone": "600000000",
            "gender": Gender.FEMALE,
            "card": "1111222233334444",
        }
        data.update(overrides)
        return User(**data)

    return _make


@pytest.fixture
def make_admin():
    """Factory for Administrator profiles with unique defaults."""
    from users_manager.models import Administrator

    def _make(suffix: str = "boss", **overrides) -> Administrator:
        data = {
            "email": f"{suffix}@example.com",
            "username": suffix,
            "password": "Secret123",
            "name": "Test",
            "lastname": "Admin",
            "telephone": "611111111",
            "current_account": "9999888877776666",
        }
        data.update(overrides)
        return Administrator(**data)

    return _make
