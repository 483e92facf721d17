"""Warden Identity - registration, login and session lookup.

This package handles identity-related concerns:
- Identity records (validated email + bcrypt hash)
- Registration with fail-fast validation and atomic uniqueness
- Login returning a signed token and a server-side session
- Session lookup, logout and expiry sweeps

Storage is pluggable: application services depend only on the
IdentityRepository and SessionRepository interfaces.
"""

from warden_identity.application import (
    IdentityDTO,
    LoginResult,
    LoginService,
    RegistrationService,
    SessionDTO,
    SessionService,
)
from warden_identity.domain.identity import (
    Email,
    EmailAlreadyExistsError,
    Identity,
    IdentityNotFoundError,
    IdentityRepository,
    InvalidEmailError,
    NewIdentity,
)

__all__ = [
    # Domain
    "Email",
    "Identity",
    "IdentityRepository",
    "NewIdentity",
    # Exceptions
    "EmailAlreadyExistsError",
    "IdentityNotFoundError",
    "InvalidEmailError",
    # Application
    "IdentityDTO",
    "LoginResult",
    "LoginService",
    "RegistrationService",
    "SessionDTO",
    "SessionService",
]
