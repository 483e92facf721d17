"""Unit tests for TokenPayload."""

from datetime import timedelta
from uuid import uuid4

import pytest

from warden_auth.schemas import TokenPayload
from warden_auth.time import utc_now


def _payload(claims, ttl=timedelta(minutes=5)) -> TokenPayload:
    now = utc_now()
    return TokenPayload(claims=claims, issued_at=now, expires_at=now + ttl)


def test_identity_claims():
    user_id = uuid4()
    payload = _payload({"sub": str(user_id), "email": "user@example.com"})

    assert payload.user_id == user_id
    assert payload.email == "user@example.com"


def test_user_id_requires_sub():
    with pytest.raises(KeyError):
        _payload({"email": "user@example.com"}).user_id


@pytest.mark.parametrize(("ttl", "expired"), [(timedelta(minutes=5), False), (timedelta(0), True)])
def test_is_expired(ttl, expired):
    assert _payload({}, ttl).is_expired() is expired
