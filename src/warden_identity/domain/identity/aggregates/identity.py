"""Identity records.

An Identity is created once by registration and never mutated by the
core. Its id and created_at are assigned by the repository at
persistence time; callers only ever build a NewIdentity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from warden_identity.domain.identity.value_objects.email import Email


@dataclass(frozen=True)
class NewIdentity:
    """A validated identity that has not been persisted yet."""

    email: Email
    password_hash: str = field(repr=False)


@dataclass(frozen=True)
class Identity:
    """A persisted identity.

    password_hash stays inside the domain and storage layers; the
    application services return IdentityDTO instead.
    """

    id: UUID
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: str,
        password_hash: str,
        created_at: datetime,
    ) -> "Identity":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
