"""
Pydantic models for profile documents.
"""
from users_manager.models.profile import (
    Administrator,
    Gender,
    Profile,
    ProfileType,
    User,
)

__all__ = [
    "Administrator",
    "Gender",
    "Profile",
    "ProfileType",
    "User",
]
