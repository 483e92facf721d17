from warden_identity.domain.identity.repositories.identity_repository import (
    IdentityRepository,
)

__all__ = ["IdentityRepository"]
