from warden_identity.infrastructure.persistence.sqlalchemy.repositories.identity_repository import (
    IdentityRepositorySQLAlchemy,
)

__all__ = ["IdentityRepositorySQLAlchemy"]
