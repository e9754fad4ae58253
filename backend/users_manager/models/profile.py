"""
Profile models for the users collection.

A stored record is exactly one variant: a User or an Administrator.
"""
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """User gender."""
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class ProfileType(str, Enum):
    """Variant discriminator stored on every record."""
    USER = "USER"
    ADMIN = "ADMIN"


class Profile(BaseModel):
    """
    Identity and contact data shared by every profile variant.

    The password is kept and compared in plaintext.
    """
    model_config = ConfigDict(validate_assignment=True)

    profile_type: ProfileType

    id: Optional[str] = Field(None, description="MongoDB ObjectId as string")
    email: str = Field(..., description="Unique email address")
    username: str = Field(..., description="Unique username")
    password: str = Field(..., description="Plaintext password")
    name: str = Field(..., description="First name")
    lastname: str = Field(..., description="Last name")
    telephone: str = Field(..., description="Telephone number")


class User(Profile):
    """Regular user profile."""
    profile_type: Literal[ProfileType.USER] = ProfileType.USER

    gender: Gender = Field(default=Gender.OTHER, description="User gender")
    card: str = Field(..., description="Card number")


class Administrator(Profile):
    """Administrator profile."""
    profile_type: Literal[ProfileType.ADMIN] = ProfileType.ADMIN

    current_account: str = Field(..., description="Current account number")
