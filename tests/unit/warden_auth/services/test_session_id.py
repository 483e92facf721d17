"""Unit tests for session id generation."""

import base64

from warden_auth.services import SESSION_ID_BYTES, generate_session_id


class TestGenerateSessionId:
    """Session ids must be long, URL-safe and unpredictable."""

    def test_has_at_least_256_bits_of_entropy(self):
        session_id = generate_session_id()
        padded = session_id + "=" * (-len(session_id) % 4)

        raw = base64.urlsafe_b64decode(padded)

        assert SESSION_ID_BYTES >= 32
        assert len(raw) == SESSION_ID_BYTES
        assert len(session_id) >= 43

    def test_is_url_safe(self):
        session_id = generate_session_id()

        assert all(c.isalnum() or c in "-_" for c in session_id)

    def test_ids_do_not_repeat(self):
        ids = {generate_session_id() for _ in range(1000)}

        assert len(ids) == 1000
