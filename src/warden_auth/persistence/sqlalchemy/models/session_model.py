"""SQLAlchemy model for server-side sessions."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from warden_auth.persistence.sqlalchemy.base import AuthBase
from warden_auth.time import utc_now


class SessionModel(AuthBase):
    """
    SQLAlchemy model for sessions.

    user_id carries no foreign key: deleting an identity does not
    cascade to its sessions.

    Table: sessions
    """

    __tablename__ = "sessions"

    session_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<SessionModel(session_id={self.session_id[:8]}..., user_id={self.user_id})>"
