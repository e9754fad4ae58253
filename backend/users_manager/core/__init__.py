"""
Core utilities: error taxonomy and logging setup.
"""
from users_manager.core.errors import (
    AuthError,
    CredentialLookupError,
    DuplicateCredential,
    DuplicateKind,
    ErrorCategory,
    InvalidIdentifier,
    NotFound,
    PersistenceError,
    RetrievalError,
    UsersManagerError,
)
from users_manager.core.log_config import configure_logging

__all__ = [
    "AuthError",
    "CredentialLookupError",
    "DuplicateCredential",
    "DuplicateKind",
    "ErrorCategory",
    "InvalidIdentifier",
    "NotFound",
    "PersistenceError",
    "RetrievalError",
    "UsersManagerError",
    "configure_logging",
]
