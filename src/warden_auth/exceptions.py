"""Authentication exceptions.

Every error raised by the warden packages derives from AuthError and
carries a machine-readable ErrorKind. Messages are plain defaults; the
presentation layer decides how (and whether) to show them.

Categories:
    ValidationError      malformed input, raised before any side effect
    ConflictError        uniqueness violations
    AuthenticationError  bad credentials (cause deliberately unspecified)
    TokenError           invalid or expired signed tokens
    NotFoundError        absent sessions or identities
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Closed set of error kinds surfaced by the core."""

    INVALID_EMAIL_FORMAT = "invalid_email_format"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    DUPLICATE_EMAIL = "duplicate_email"
    DUPLICATE_SESSION = "duplicate_session"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    NOT_FOUND = "not_found"
    HASHING_FAILURE = "hashing_failure"


class AuthError(Exception):
    """Base exception for all authentication errors."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class ValidationError(AuthError):
    """Input rejected before any mutation was attempted."""


class ConflictError(AuthError):
    """A uniqueness constraint would be violated."""


class AuthenticationError(AuthError):
    """Credentials could not be verified."""


class TokenError(AuthError):
    """A signed token could not be accepted."""


class NotFoundError(AuthError):
    """The requested record does not exist."""

    kind = ErrorKind.NOT_FOUND


class PasswordTooShortError(ValidationError):
    """Raised when a password is below the minimum length."""

    kind = ErrorKind.PASSWORD_TOO_SHORT

    def __init__(self, min_length: int, message: str | None = None):
        self.min_length = min_length
        super().__init__(message or f"Password must be at least {min_length} characters")


class PasswordTooLongError(ValidationError):
    """Raised when a password exceeds what bcrypt can hash without truncation."""

    kind = ErrorKind.PASSWORD_TOO_LONG

    def __init__(self, max_bytes: int, message: str | None = None):
        self.max_bytes = max_bytes
        super().__init__(message or f"Password cannot exceed {max_bytes} bytes")


class InvalidCredentialsError(AuthenticationError):
    """Raised when email or password is incorrect during login."""

    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class InvalidTokenError(TokenError):
    """Raised when a JWT token has a bad signature or is malformed."""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(TokenError):
    """Raised when a correctly signed JWT token is past its expiry."""

    kind = ErrorKind.EXPIRED_TOKEN

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class SessionNotFoundError(NotFoundError):
    """Raised when a session is absent or has expired."""

    def __init__(self, message: str = "Session not found"):
        super().__init__(message)


class DuplicateSessionError(ConflictError):
    """Raised when a session id is already in use."""

    kind = ErrorKind.DUPLICATE_SESSION

    def __init__(self, message: str = "Session id already exists"):
        super().__init__(message)


class HashingError(AuthError):
    """Raised when the hashing backend fails. Not retried."""

    kind = ErrorKind.HASHING_FAILURE

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message)
