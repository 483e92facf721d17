"""SQLAlchemy declarative base for warden_identity models."""

from sqlalchemy.orm import DeclarativeBase


class IdentityBase(DeclarativeBase):
    """Declarative base for warden_identity models."""
