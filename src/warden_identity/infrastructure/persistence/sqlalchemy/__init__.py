"""SQLAlchemy implementation of warden_identity persistence."""

from warden_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from warden_identity.infrastructure.persistence.sqlalchemy.models import IdentityModel
from warden_identity.infrastructure.persistence.sqlalchemy.repositories import (
    IdentityRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "IdentityModel",
    "IdentityRepositorySQLAlchemy",
]
