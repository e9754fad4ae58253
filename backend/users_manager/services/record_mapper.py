"""
Conversion between profile models and flat MongoDB records.

Records carry an explicit P_TYPE discriminator. Records written before the
discriminator existed are recognised by field presence: U_GENDER means a
User, A_CURRENT_ACCOUNT means an Administrator.
"""
import logging
from typing import Any, Optional

from bson import ObjectId
from pydantic import ValidationError

from users_manager.database.databases.users_db import Fields
from users_manager.models.profile import (
    Administrator,
    Gender,
    Profile,
    ProfileType,
    User,
)

logger = logging.getLogger(__name__)

# Matches tagged user records and untagged records with a U_GENDER field,
# even a null one.
USER_FILTER: dict[str, Any] = {
    "$or": [
        {Fields.TYPE: ProfileType.USER.value},
        {Fields.TYPE: {"$exists": False}, Fields.GENDER: {"$exists": True}},
    ]
}

# Untagged records count as administrators only when no U_GENDER is present.
ADMIN_FILTER: dict[str, Any] = {
    "$or": [
        {Fields.TYPE: ProfileType.ADMIN.value},
        {
            Fields.TYPE: {"$exists": False},
            Fields.GENDER: {"$exists": False},
            Fields.CURRENT_ACCOUNT: {"$exists": True, "$ne": None},
        },
    ]
}


def to_record(profile: Profile, include_id: bool = True) -> dict[str, Any]:
    """
    Serialize a profile into the flat record shape.

    Args:
        profile: User or Administrator instance
        include_id: Write _id when the profile has one. Inserts pass False
            so the store generates it.

    Returns:
        Record dict ready for insert_one

    Raises:
        TypeError: If the profile is not a known variant
    """
    record: dict[str, Any] = {}
    if include_id and profile.id is not None:
        record[Fields.ID] = ObjectId(profile.id)

    record.update({
        Fields.TYPE: _profile_type(profile).value,
        Fields.EMAIL: profile.email,
        Fields.USERNAME: profile.username,
    })
    record.update(update_fields(profile))
    return record


def update_fields(profile: Profile) -> dict[str, Any]:
    """Return the fields an update is allowed to replace (never id, email or username)."""
    fields: dict[str, Any] = {
        Fields.PASSWORD: profile.password,
        Fields.NAME: profile.name,
        Fields.LASTNAME: profile.lastname,
        Fields.TELEPHONE: profile.telephone,
    }

    if isinstance(profile, User):
        fields[Fields.GENDER] = profile.gender.value
        fields[Fields.CARD] = profile.card
    elif isinstance(profile, Administrator):
        fields[Fields.CURRENT_ACCOUNT] = profile.current_account
    else:
        raise TypeError(f"Unsupported profile type: {type(profile).__name__}")

    return fields


def variant_filter(profile: Profile) -> dict[str, Any]:
    """Return the query matching records of the same variant as profile."""
    if _profile_type(profile) is ProfileType.USER:
        return USER_FILTER
    return ADMIN_FILTER


def from_record(record: dict[str, Any]) -> Optional[Profile]:
    """
    Deserialize a record into the matching profile variant.

    Args:
        record: Raw document from the users collection

    Returns:
        User or Administrator, or None if the record is not a known variant
    """
    profile_type = record_type(record)

    try:
        if profile_type is ProfileType.USER:
            return _to_user(record)
        if profile_type is ProfileType.ADMIN:
            return _to_administrator(record)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Skipping malformed record {record.get(Fields.ID)}: {e}")
        return None

    logger.warning(f"Skipping record {record.get(Fields.ID)} of unknown profile type")
    return None


def record_type(record: dict[str, Any]) -> Optional[ProfileType]:
    """Determine the variant of a record, or None if it cannot be told."""
    tag = record.get(Fields.TYPE)
    if tag is not None:
        try:
            return ProfileType(tag)
        except ValueError:
            return None

    # Untagged legacy records; a null U_GENDER still marks a user
    if Fields.GENDER in record:
        return ProfileType.USER
    if record.get(Fields.CURRENT_ACCOUNT) is not None:
        return ProfileType.ADMIN
    return None


def _profile_type(profile: Profile) -> ProfileType:
    if isinstance(profile, User):
        return ProfileType.USER
    if isinstance(profile, Administrator):
        return ProfileType.ADMIN
    raise TypeError(f"Unsupported profile type: {type(profile).__name__}")


def _common_fields(record: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": str(record[Fields.ID]),
        "email": record.get(Fields.EMAIL),
        "username": record.get(Fields.USERNAME),
        "password": record.get(Fields.PASSWORD),
        "name": record.get(Fields.NAME),
        "lastname": record.get(Fields.LASTNAME),
        "telephone": record.get(Fields.TELEPHONE),
    }


def _to_user(record: dict[str, Any]) -> User:
    gender = record.get(Fields.GENDER)
    return User(
        **_common_fields(record),
        gender=Gender(gender) if gender is not None else Gender.OTHER,
        card=record.get(Fields.CARD),
    )


def _to_administrator(record: dict[str, Any]) -> Administrator:
    return Administrator(
        **_common_fields(record),
        current_account=record.get(Fields.CURRENT_ACCOUNT),
    )
