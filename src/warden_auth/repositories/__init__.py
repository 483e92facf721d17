"""Abstract repository interfaces for authentication."""

from warden_auth.repositories.session_repository import (
    SessionData,
    SessionRepository,
)

__all__ = [
    "SessionData",
    "SessionRepository",
]
