"""Identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from warden_identity.domain.identity.aggregates import Identity, NewIdentity
from warden_identity.domain.identity.value_objects import Email


class IdentityRepository(ABC):
    """
    Repository interface for identity credentials.

    Implementations must be safe to call from concurrent in-flight
    orchestrations, and ``save`` must be an atomic insert-if-absent on
    the normalized email so that two racing registrations cannot both
    succeed.
    """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Identity]:
        """Find an identity by its (normalized) email address."""

    @abstractmethod
    async def find_by_id(self, identity_id: UUID) -> Optional[Identity]:
        """Find an identity by its ID."""

    @abstractmethod
    async def save(self, candidate: NewIdentity) -> Identity:
        """
        Persist a new identity, assigning its id and created_at.

        Raises
        ------
        EmailAlreadyExistsError
            If an identity with the same email already exists
        """

    @abstractmethod
    async def update(self, identity: Identity) -> Optional[Identity]:
        """Replace a stored identity; returns None if it does not exist.

        The email is normalized the same way ``save`` normalizes it.

        Raises
        ------
        InvalidEmailError
            If the new email is malformed
        EmailAlreadyExistsError
            If another identity already owns the new email
        """

    @abstractmethod
    async def delete(self, identity_id: UUID) -> bool:
        """Delete an identity by ID; returns True if it existed."""
