"""Authentication services.

Provides password hashing, JWT token management and session ids.
"""

from warden_auth.services.jwt_service import JWTService
from warden_auth.services.password_service import PasswordHashingService
from warden_auth.services.session_id import SESSION_ID_BYTES, generate_session_id

__all__ = [
    "PasswordHashingService",
    "JWTService",
    "SESSION_ID_BYTES",
    "generate_session_id",
]
