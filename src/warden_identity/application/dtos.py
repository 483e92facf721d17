"""DTOs returned to callers of the identity application services.

None of them carry the password hash.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from warden_auth.repositories import SessionData
from warden_identity.domain.identity import Identity


@dataclass(frozen=True)
class IdentityDTO:
    """Public view of a persisted identity."""

    id: UUID
    email: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityDTO":
        return cls(
            id=identity.id,
            email=identity.email,
            created_at=identity.created_at,
        )


@dataclass(frozen=True)
class LoginResult:
    """Everything a successful login hands back."""

    identity: IdentityDTO
    token: str
    session_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "identity": self.identity.to_dict(),
            "token": self.token,
            "session_id": self.session_id,
        }


@dataclass(frozen=True)
class SessionDTO:
    """A live session resolved for downstream request handlers.

    email is None when the owning identity has been deleted since login.
    """

    session_id: str
    user_id: UUID
    email: Optional[str]
    created_at: datetime
    expires_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "user_id": str(self.user_id),
            "email": self.email,
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
        }

    @classmethod
    def from_session(
        cls,
        session: SessionData,
        email: Optional[str],
    ) -> "SessionDTO":
        return cls(
            session_id=session.session_id,
            user_id=session.user_id,
            email=email,
            created_at=session.created_at,
            expires_at=session.expires_at,
        )
