"""Session identifier generation."""

import secrets

# 32 random bytes, 43 characters once URL-safe base64 encoded
SESSION_ID_BYTES = 32


def generate_session_id() -> str:
    """Return a new unguessable session id from the OS CSPRNG."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)
