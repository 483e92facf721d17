"""Identity domain exceptions.

Custom exceptions for the identity domain, used for validation
and business rule violations. They extend the warden_auth taxonomy so
callers can handle every failure through one ErrorKind.
"""

from uuid import UUID

from warden_auth.exceptions import (
    ConflictError,
    ErrorKind,
    NotFoundError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    kind = ErrorKind.INVALID_EMAIL_FORMAT

    def __init__(self, message: str = "Invalid email format") -> None:
        super().__init__(message)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    kind = ErrorKind.DUPLICATE_EMAIL

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class IdentityNotFoundError(NotFoundError):
    """Identity not found."""

    def __init__(self, identity_id: UUID | str) -> None:
        self.identity_id = identity_id
        super().__init__(f"Identity not found: {identity_id}")
