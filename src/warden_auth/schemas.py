"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    claims
        The claims exactly as they were issued (``iat``/``exp`` removed)
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    claims: dict[str, Any] = field(hash=False)
    issued_at: datetime
    expires_at: datetime

    @property
    def user_id(self) -> UUID:
        """The identity id carried in the ``sub`` claim."""
        return UUID(self.claims["sub"])

    @property
    def email(self) -> str:
        return self.claims["email"]

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=timezone.utc) >= self.expires_at
