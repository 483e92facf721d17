"""Identity application layer: services and caller-facing DTOs."""

from warden_identity.application.dtos import IdentityDTO, LoginResult, SessionDTO
from warden_identity.application.services import (
    LoginService,
    RegistrationService,
    SessionService,
)

__all__ = [
    "IdentityDTO",
    "LoginResult",
    "LoginService",
    "RegistrationService",
    "SessionDTO",
    "SessionService",
]
