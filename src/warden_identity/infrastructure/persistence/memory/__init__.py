"""In-memory implementations of the identity repositories."""

from warden_identity.infrastructure.persistence.memory.identity_repository import (
    InMemoryIdentityRepository,
)

__all__ = ["InMemoryIdentityRepository"]
