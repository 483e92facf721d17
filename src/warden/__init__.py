"""Warden - credential verification and session lifecycle backend."""

from warden.container import (
    AuthServices,
    build_in_memory_services,
    build_sqlalchemy_services,
)

__all__ = [
    "AuthServices",
    "build_in_memory_services",
    "build_sqlalchemy_services",
]

__version__ = "0.1.0"
