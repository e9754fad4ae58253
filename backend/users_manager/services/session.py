"""
Session holder for the currently authenticated profile.

A ProfileSession is created per caller and handed to the ProfileService, so
several sessions can coexist in one process.
"""
from typing import Optional

from users_manager.models.profile import Profile


class ProfileSession:
    """Anonymous until a successful login stores a profile."""

    def __init__(self):
        self._profile: Optional[Profile] = None

    def get_current_profile(self) -> Optional[Profile]:
        return self._profile

    def set_current_profile(self, profile: Profile) -> None:
        self._profile = profile

    @property
    def is_authenticated(self) -> bool:
        return self._profile is not None
