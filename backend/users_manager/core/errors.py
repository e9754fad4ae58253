"""
Error taxonomy for the data-access layer.

Every failure reported to callers is a UsersManagerError carrying an
ErrorCategory. Raw pymongo exceptions are wrapped at the boundary of each
operation and never reach the caller.
"""
from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    """Category of a reported error."""
    DUPLICATE_CREDENTIAL = "duplicate_credential"
    AUTH = "auth"
    RETRIEVAL = "retrieval"
    PERSISTENCE = "persistence"
    NOT_FOUND = "not_found"
    INVALID_IDENTIFIER = "invalid_identifier"
    LOOKUP = "lookup"


class DuplicateKind(str, Enum):
    """Which credential collided on registration."""
    EMAIL = "email"
    USERNAME = "username"
    BOTH = "both"


class UsersManagerError(Exception):
    """Base error. Distinguished by category and message."""

    category: ErrorCategory = ErrorCategory.PERSISTENCE
    default_message = "Data access error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self.category.value!r}, message={self.message!r})"


class DuplicateCredential(UsersManagerError):
    """Email and/or username already registered."""

    category = ErrorCategory.DUPLICATE_CREDENTIAL

    _messages = {
        DuplicateKind.EMAIL: "Email already exists",
        DuplicateKind.USERNAME: "Username already exists",
        DuplicateKind.BOTH: "Both email and username already exist",
    }

    def __init__(self, kind: DuplicateKind):
        self.kind = DuplicateKind(kind)
        super().__init__(self._messages[self.kind])


class AuthError(UsersManagerError):
    category = ErrorCategory.AUTH
    default_message = "Error while logging in"


class RetrievalError(UsersManagerError):
    category = ErrorCategory.RETRIEVAL
    default_message = "Error while retrieving users"


class PersistenceError(UsersManagerError):
    category = ErrorCategory.PERSISTENCE
    default_message = "Error while saving user"


class NotFound(UsersManagerError):
    category = ErrorCategory.NOT_FOUND
    default_message = "User not found"


class InvalidIdentifier(UsersManagerError):
    category = ErrorCategory.INVALID_IDENTIFIER
    default_message = "Invalid user ID"

    def __init__(self, value: object = None):
        self.value = value
        super().__init__(f"Invalid user ID: {value!r}" if value is not None else None)


class CredentialLookupError(UsersManagerError):
    """Existence check for email/username could not reach the store."""

    category = ErrorCategory.LOOKUP
    default_message = "Error while verifying credentials"
