"""In-memory implementations of the swappable auth repositories."""

from warden_auth.persistence.memory.session_repository import InMemorySessionRepository

__all__ = ["InMemorySessionRepository"]
