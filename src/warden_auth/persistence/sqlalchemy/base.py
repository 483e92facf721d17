"""SQLAlchemy declarative base for warden_auth models.

This provides a separate Base for auth models. The consuming application
should include AuthBase.metadata in its schema creation or migrations.

Examples
--------
from warden_auth.persistence.sqlalchemy import AuthBase
from warden_identity.infrastructure.persistence.sqlalchemy import IdentityBase

target_metadata = [AuthBase.metadata, IdentityBase.metadata]
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for warden_auth models."""
