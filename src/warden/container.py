"""Composition root.

Concrete storage adapters are chosen here and nowhere else; the
application services only ever see the repository interfaces.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from warden_auth import JWTService, PasswordHashingService, SessionRepository
from warden_auth.persistence.memory import InMemorySessionRepository
from warden_auth.persistence.sqlalchemy import SessionRepositorySQLAlchemy
from warden_config import Settings
from warden_identity import (
    IdentityRepository,
    LoginService,
    RegistrationService,
    SessionService,
)
from warden_identity.infrastructure.persistence.memory import InMemoryIdentityRepository
from warden_identity.infrastructure.persistence.sqlalchemy import (
    IdentityRepositorySQLAlchemy,
)


@dataclass(frozen=True)
class AuthServices:
    """The wired application services."""

    registration: RegistrationService
    login: LoginService
    sessions: SessionService
    jwt_service: JWTService


def build_password_service(settings: Settings) -> PasswordHashingService:
    return PasswordHashingService(
        rounds=settings.bcrypt_rounds,
        min_length=settings.password_min_length,
    )


def build_jwt_service(settings: Settings) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire=settings.access_token_ttl,
    )


def _wire(
    settings: Settings,
    identity_repository: IdentityRepository,
    session_repository: SessionRepository,
) -> AuthServices:
    password_service = build_password_service(settings)
    jwt_service = build_jwt_service(settings)
    return AuthServices(
        registration=RegistrationService(
            identity_repository=identity_repository,
            password_service=password_service,
        ),
        login=LoginService(
            identity_repository=identity_repository,
            session_repository=session_repository,
            password_service=password_service,
            jwt_service=jwt_service,
            session_ttl=settings.session_ttl,
        ),
        sessions=SessionService(
            session_repository=session_repository,
            identity_repository=identity_repository,
            session_ttl=settings.session_ttl,
        ),
        jwt_service=jwt_service,
    )


def build_in_memory_services(settings: Settings) -> AuthServices:
    """Wire the services against fresh in-process stores."""
    return _wire(
        settings,
        InMemoryIdentityRepository(),
        InMemorySessionRepository(),
    )


def build_sqlalchemy_services(session: AsyncSession, settings: Settings) -> AuthServices:
    """Wire the services against one database unit of work."""
    return _wire(
        settings,
        IdentityRepositorySQLAlchemy(session),
        SessionRepositorySQLAlchemy(session),
    )
