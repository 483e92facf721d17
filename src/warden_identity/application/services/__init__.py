"""Identity application services."""

from warden_identity.application.services.login_service import LoginService
from warden_identity.application.services.registration_service import (
    RegistrationService,
)
from warden_identity.application.services.session_service import SessionService

__all__ = [
    "LoginService",
    "RegistrationService",
    "SessionService",
]
