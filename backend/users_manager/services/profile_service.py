"""
Profile service: registration, login, listing, update and deletion.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from users_manager.core.errors import (
    AuthError,
    DuplicateCredential,
    DuplicateKind,
    InvalidIdentifier,
    NotFound,
    PersistenceError,
    RetrievalError,
)
from users_manager.database.connections import get_users_collection
from users_manager.database.databases.users_db import Fields
from users_manager.models.profile import Profile, User
from users_manager.services import record_mapper
from users_manager.services.credential_checker import CredentialChecker
from users_manager.services.session import ProfileSession

logger = logging.getLogger(__name__)


def parse_object_id(value: Optional[str]) -> ObjectId:
    """
    Parse a profile id.

    Raises:
        InvalidIdentifier: If value is not a well-formed ObjectId
    """
    if not isinstance(value, str):
        raise InvalidIdentifier(value)
    try:
        return ObjectId(value)
    except InvalidId as e:
        raise InvalidIdentifier(value) from e


class ProfileService:
    """Service for profile data access operations."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        session: Optional[ProfileSession] = None,
    ):
        """Initialize with the users collection and the caller's session."""
        self.collection = collection
        self.session = session if session is not None else ProfileSession()
        self.credential_checker = CredentialChecker(collection)

    async def register(self, candidate: Profile) -> Profile:
        """
        Register a new profile.

        Args:
            candidate: User or Administrator to store (id is ignored)

        Returns:
            The same candidate with its generated id assigned

        Raises:
            DuplicateCredential: If the email and/or username is taken
            CredentialLookupError: If the existence check fails
            PersistenceError: If the insert fails
        """
        existing = await self.credential_checker.check(candidate.email, candidate.username)
        if existing.duplicate_kind is not None:
            raise DuplicateCredential(existing.duplicate_kind)

        record = record_mapper.to_record(candidate, include_id=False)

        try:
            result = await self.collection.insert_one(record)
        except DuplicateKeyError as e:
            # Lost the race against a concurrent registration
            kind = await self._duplicate_kind(candidate, e)
            if kind is None:
                logger.error(f"Duplicate key on register without a colliding credential: {e}")
                raise PersistenceError() from e
            raise DuplicateCredential(kind) from e
        except PyMongoError as e:
            logger.error(f"Failed to register {candidate.username}: {e}")
            raise PersistenceError() from e

        candidate.id = str(result.inserted_id)
        logger.info(f"Registered {candidate.profile_type.value} {candidate.username} ({candidate.id})")
        return candidate

    async def login(self, credential: str, password: str) -> Optional[Profile]:
        """
        Authenticate by email or username and password.

        Matching is exact and case-sensitive. On success the profile becomes
        the session's current profile.

        Args:
            credential: Email or username
            password: Plaintext password

        Returns:
            The authenticated User or Administrator, or None if nothing matches

        Raises:
            AuthError: If the store cannot be queried
        """
        query = {
            "$and": [
                {"$or": [{Fields.EMAIL: credential}, {Fields.USERNAME: credential}]},
                {Fields.PASSWORD: password},
            ]
        }

        try:
            doc = await self.collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"Login lookup failed: {e}")
            raise AuthError() from e

        if doc is None:
            logger.info(f"Login failed for {credential}")
            return None

        profile = record_mapper.from_record(doc)
        if profile is None:
            return None

        self.session.set_current_profile(profile)
        logger.info(f"Logged in {profile.profile_type.value} {profile.username}")
        return profile

    async def get_users(self) -> list[User]:
        """
        List every User profile. Administrators are excluded.

        Raises:
            RetrievalError: If the store cannot be queried
        """
        try:
            cursor = self.collection.find(record_mapper.USER_FILTER)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Failed to list users: {e}")
            raise RetrievalError() from e

        users = []
        for doc in docs:
            profile = record_mapper.from_record(doc)
            if isinstance(profile, User):
                users.append(profile)
        return users

    async def get_user(self, user_id: str) -> Optional[Profile]:
        """
        Get a single profile by ID.

        Returns:
            User or Administrator, or None if not found

        Raises:
            InvalidIdentifier: If user_id is malformed
            RetrievalError: If the store cannot be queried
        """
        oid = parse_object_id(user_id)

        try:
            doc = await self.collection.find_one({Fields.ID: oid})
        except PyMongoError as e:
            logger.error(f"Failed to fetch user {user_id}: {e}")
            raise RetrievalError("Error while retrieving user") from e

        if doc is None:
            return None
        return record_mapper.from_record(doc)

    async def update_user(self, profile: Profile) -> bool:
        """
        Replace the mutable fields of a stored profile.

        Email, username and id are never changed. Only a record of the same
        variant as profile is matched, so a User never overwrites an
        Administrator or the other way round.

        Returns:
            True if any field value changed, False if the record already
            held the same values

        Raises:
            InvalidIdentifier: If the profile id is malformed
            NotFound: If no record of the same variant has the profile id
            PersistenceError: If the update fails
        """
        oid = parse_object_id(profile.id)

        try:
            result = await self.collection.update_one(
                {"$and": [{Fields.ID: oid}, record_mapper.variant_filter(profile)]},
                {"$set": record_mapper.update_fields(profile)},
            )
        except PyMongoError as e:
            logger.error(f"Failed to update user {profile.id}: {e}")
            raise PersistenceError("Error while updating user") from e

        if result.matched_count == 0:
            raise NotFound(f"User {profile.id} not found")

        modified = result.modified_count > 0
        logger.info(f"Updated user {profile.id} (modified={modified})")
        return modified

    async def delete_user(self, user_id: str) -> bool:
        """
        Delete a profile by ID.

        Returns:
            True if a record was removed, False if none had that id

        Raises:
            InvalidIdentifier: If user_id is malformed
            PersistenceError: If the delete fails
        """
        oid = parse_object_id(user_id)

        try:
            result = await self.collection.delete_one({Fields.ID: oid})
        except PyMongoError as e:
            logger.error(f"Failed to delete user {user_id}: {e}")
            raise PersistenceError("Error while deleting user") from e

        deleted = result.deleted_count > 0
        logger.info(f"Delete user {user_id} (deleted={deleted})")
        return deleted

    async def _duplicate_kind(
        self, candidate: Profile, error: DuplicateKeyError
    ) -> Optional[DuplicateKind]:
        """Work out which credential a DuplicateKeyError refers to."""
        details = error.details or {}
        key_pattern = details.get("keyPattern") or details.get("keyValue") or {}

        email = Fields.EMAIL in key_pattern
        username = Fields.USERNAME in key_pattern
        if email or username:
            if email and username:
                return DuplicateKind.BOTH
            return DuplicateKind.EMAIL if email else DuplicateKind.USERNAME

        existing = await self.credential_checker.check(candidate.email, candidate.username)
        return existing.duplicate_kind


async def get_profile_service(session: Optional[ProfileSession] = None) -> ProfileService:
    """Build a ProfileService bound to the configured users collection."""
    collection = await get_users_collection()
    return ProfileService(collection, session)
