"""SQLAlchemy implementation of warden_auth persistence.

Usage:
    from warden_auth.persistence.sqlalchemy import (
        AuthBase,
        SessionModel,
        SessionRepositorySQLAlchemy,
    )
"""

from warden_auth.persistence.sqlalchemy.base import AuthBase
from warden_auth.persistence.sqlalchemy.models import SessionModel
from warden_auth.persistence.sqlalchemy.repositories import SessionRepositorySQLAlchemy

__all__ = [
    "AuthBase",
    "SessionModel",
    "SessionRepositorySQLAlchemy",
]
