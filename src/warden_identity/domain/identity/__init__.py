"""Identity domain: validated emails, identity records and their repository."""

from warden_identity.domain.identity.aggregates import Identity, NewIdentity
from warden_identity.domain.identity.repositories import IdentityRepository
from warden_identity.domain.identity.value_objects import Email
from warden_identity.exceptions import (
    EmailAlreadyExistsError,
    IdentityNotFoundError,
    InvalidEmailError,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "Identity",
    "IdentityNotFoundError",
    "IdentityRepository",
    "InvalidEmailError",
    "NewIdentity",
]
