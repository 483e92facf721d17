"""SQLAlchemy model for identities."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from warden_auth.time import utc_now
from warden_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class IdentityModel(IdentityBase):
    """SQLAlchemy model for persisting identities.

    The UNIQUE constraint on email is what makes ``save`` an atomic
    insert-if-absent.

    Table: identities
    """

    __tablename__ = "identities"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    # bcrypt format, ~60 chars
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<IdentityModel(id={self.id}, email={self.email})>"
