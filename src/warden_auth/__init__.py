"""Warden Auth - Generic credential and session infrastructure.

This package provides authentication infrastructure that is independent
of any specific identity model. It handles:
- Password hashing (bcrypt)
- JWT token issuance and verification
- Server-side session storage with lazy expiry

Architecture:
    warden_auth/
    ├── services/           # Pure logic (password hashing, JWT, session ids)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   ├── memory/
    │   └── sqlalchemy/
    ├── schemas.py          # Data classes
    └── exceptions.py       # Error taxonomy

Usage:
    from warden_auth import PasswordHashingService, JWTService
    from warden_auth.persistence.sqlalchemy import SessionRepositorySQLAlchemy
"""

from warden_auth.exceptions import (
    AuthenticationError,
    AuthError,
    ConflictError,
    DuplicateSessionError,
    ErrorKind,
    ExpiredTokenError,
    HashingError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    PasswordTooLongError,
    PasswordTooShortError,
    SessionNotFoundError,
    TokenError,
    ValidationError,
)
from warden_auth.repositories import SessionData, SessionRepository
from warden_auth.schemas import TokenPayload
from warden_auth.services import (
    JWTService,
    PasswordHashingService,
    generate_session_id,
)

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    "generate_session_id",
    # Repositories (interfaces)
    "SessionData",
    "SessionRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "ErrorKind",
    "AuthError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "TokenError",
    "NotFoundError",
    "PasswordTooShortError",
    "PasswordTooLongError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "SessionNotFoundError",
    "DuplicateSessionError",
    "HashingError",
]
