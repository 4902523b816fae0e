"""Project-wide custom exceptions.

This module centralizes domain-specific exception types so that routers and
services can raise / catch them without importing deep infrastructure errors
like ``asyncpg`` or raw SQLAlchemy exceptions.

Add new errors here rather than scattering small ``class XError(Exception):``
definitions across the codebase; this keeps the public error surface easy to
audit and map to HTTP responses.
"""
from __future__ import annotations


class TelnyxBridgeError(Exception):
    """Base class for all custom project exceptions.

    Subclass this rather than ``Exception`` directly for new domain errors.
    """


class ExtraNotFoundError(TelnyxBridgeError):
    """Raised when an operation needs the session Extra of a user that never
    logged in (or whose Extra was lost on restart and not re-initialised).
    """
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"No extra found for user {user_id}")


class ThreadNotFoundError(TelnyxBridgeError):
    """Raised when a thread id does not correspond to a stored record."""
    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Thread not found: {thread_id}")


class UserNotFoundError(TelnyxBridgeError):
    """Raised when a user id does not correspond to a stored record."""
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class UnsupportedCredentialsError(TelnyxBridgeError):
    """Raised for a credential kind the login flow has no branch for."""
    def __init__(self, kind: str | None):
        self.kind = kind or "<unknown>"
        super().__init__(f"Unsupported credential kind: {self.kind}")


__all__ = [
    "TelnyxBridgeError",
    "ExtraNotFoundError",
    "ThreadNotFoundError",
    "UserNotFoundError",
    "UnsupportedCredentialsError",
]
