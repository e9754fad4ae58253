"""
users_manager - MongoDB data-access layer for user and administrator profiles.

The package does not configure logging itself. The host application calls
users_manager.core.configure_logging() once at startup.
"""
