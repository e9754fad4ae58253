"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with services wired to the mock
database and collections that simulate an unreachable store.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def session():
    """Fresh anonymous session."""
    from users_manager.services.session import ProfileSession
    return ProfileSession()


@pytest.fixture
def profile_service(seeded_collection, session):
    """ProfileService over the seeded mock collection."""
    from users_manager.services.profile_service import ProfileService
    return ProfileService(seeded_collection, session)


@pytest.fixture
def empty_profile_service(users_collection, session):
    """ProfileService over an empty mock collection."""
    from users_manager.services.profile_service import ProfileService
    return ProfileService(users_collection, session)


# =============================================================================
# Store Failure Fixtures
# =============================================================================

@pytest.fixture
def store_down_error():
    return ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")


@pytest.fixture
def broken_collection(store_down_error):
    """
    A collection whose every operation fails as if the server were unreachable.
    """
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=store_down_error)
    collection.insert_one = AsyncMock(side_effect=store_down_error)
    collection.update_one = AsyncMock(side_effect=store_down_error)
    collection.delete_one = AsyncMock(side_effect=store_down_error)

    cursor = MagicMock()
    cursor.to_list = AsyncMock(side_effect=store_down_error)
    collection.find = MagicMock(return_value=cursor)
    return collection
