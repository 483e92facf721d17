"""Value objects for the identity domain."""

from warden_identity.domain.identity.value_objects.email import Email

__all__ = ["Email"]
