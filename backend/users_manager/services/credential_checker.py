"""
Existence checks for email and username.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from users_manager.core.errors import CredentialLookupError, DuplicateKind
from users_manager.database.databases.users_db import Fields

logger = logging.getLogger(__name__)


class CredentialExistence(BaseModel):
    """Which credentials are already taken."""
    email: bool = False
    username: bool = False

    @property
    def duplicate_kind(self) -> Optional[DuplicateKind]:
        if self.email and self.username:
            return DuplicateKind.BOTH
        if self.email:
            return DuplicateKind.EMAIL
        if self.username:
            return DuplicateKind.USERNAME
        return None


class CredentialChecker:
    """Looks up whether an email or username is already registered."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def check(self, email: str, username: str) -> CredentialExistence:
        """
        Check whether the email and username exist among stored records.

        Args:
            email: Email to look up
            username: Username to look up

        Returns:
            CredentialExistence flags for both credentials

        Raises:
            CredentialLookupError: If the store cannot be queried
        """
        try:
            email_doc = await self.collection.find_one(
                {Fields.EMAIL: email}, projection={Fields.ID: 1}
            )
            username_doc = await self.collection.find_one(
                {Fields.USERNAME: username}, projection={Fields.ID: 1}
            )
        except PyMongoError as e:
            logger.error(f"Credential lookup failed: {e}")
            raise CredentialLookupError() from e

        return CredentialExistence(
            email=email_doc is not None,
            username=username_doc is not None,
        )
