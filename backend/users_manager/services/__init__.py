"""
Service layer for profile data access.
"""
from users_manager.services.credential_checker import CredentialChecker, CredentialExistence
from users_manager.services.profile_service import ProfileService, get_profile_service
from users_manager.services.session import ProfileSession

__all__ = [
    "CredentialChecker",
    "CredentialExistence",
    "ProfileService",
    "ProfileSession",
    "get_profile_service",
]
