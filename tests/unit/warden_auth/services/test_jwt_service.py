"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from warden_auth.exceptions import ExpiredTokenError, InvalidTokenError, TokenError
from warden_auth.services import JWTService

SECRET = "test-secret-key-0123456789-abcdefghijklmnop"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_default_access_expiry_is_one_hour(self):
        service = JWTService(secret_key=SECRET)

        assert service.access_token_expire == timedelta(hours=1)


class TestIssueAndValidate:
    """Tests for generic claim issuance."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)

    def test_token_has_three_segments(self):
        token = self.service.issue({"sub": "abc"}, timedelta(minutes=5))

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_validate_returns_original_claims(self):
        claims = {"sub": str(uuid4()), "email": "a@b.com", "scope": ["read"]}

        token = self.service.issue(claims, timedelta(minutes=5))
        payload = self.service.verify_token(token)

        assert payload.claims == claims

    def test_validate_exposes_issue_and_expiry_times(self):
        token = self.service.issue({"sub": "abc"}, timedelta(minutes=30))

        payload = self.service.verify_token(token)

        assert payload.expires_at - payload.issued_at == timedelta(minutes=30)
        assert not payload.is_expired()

    @pytest.mark.parametrize(
        "extra",
        [{"exp": 0}, {"iat": 0}, {"aud": "web"}, {"nbf": 9999999999}],
    )
    def test_claims_checked_on_decode_are_rejected_at_issue(self, extra):
        with pytest.raises(ValueError, match="reserved"):
            self.service.issue({"sub": "abc", **extra}, timedelta(minutes=5))

    def test_other_registered_claims_round_trip(self):
        claims = {"sub": "abc", "iss": "warden", "jti": "token-1"}

        token = self.service.issue(claims, timedelta(minutes=5))

        assert self.service.verify_token(token).claims == claims

    @pytest.mark.parametrize("ttl", [timedelta(0), timedelta(seconds=-1), timedelta(hours=-2)])
    def test_zero_or_negative_ttl_is_expired_not_invalid(self, ttl):
        token = self.service.issue({"sub": "abc"}, ttl)

        with pytest.raises(ExpiredTokenError) as exc_info:
            self.service.verify_token(token)

        assert not isinstance(exc_info.value, InvalidTokenError)
        assert isinstance(exc_info.value, TokenError)

    def test_validate_does_not_mutate_state(self):
        token = self.service.issue({"sub": "abc"}, timedelta(minutes=5))

        first = self.service.verify_token(token)
        second = self.service.verify_token(token)

        assert first == second


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()
        self.email = "test@example.com"

    def test_verify_valid_access_token(self):
        """Test that valid access token is verified correctly."""
        token = self.service.create_access_token(user_id=self.user_id, email=self.email)

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == self.email
        assert payload.claims == {"sub": str(self.user_id), "email": self.email}

    def test_custom_expiry(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            expires_delta=timedelta(minutes=5),
        )

        payload = self.service.verify_token(token)

        assert payload.expires_at - payload.issued_at == timedelta(minutes=5)

    def test_zero_expiry_is_honoured(self):
        """A zero delta must not fall back to the default lifetime."""
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            expires_delta=timedelta(0),
        )

        with pytest.raises(ExpiredTokenError):
            self.service.verify_token(token)

    def test_verify_invalid_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_verify_garbage_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("")

    def test_verify_tampered_token_raises(self):
        """Test that tampered token raises InvalidTokenError."""
        token = self.service.create_access_token(user_id=self.user_id, email=self.email)
        header, claims, signature = token.split(".")
        tampered_sig = ("A" if signature[0] != "A" else "B") + signature[1:]

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(f"{header}.{claims}.{tampered_sig}")

    def test_verify_wrong_secret_raises(self):
        other_service = JWTService(secret_key="different-secret-0123456789-abcdefghijkl")
        token = other_service.create_access_token(user_id=self.user_id, email=self.email)

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_expired_token_with_bad_signature_is_invalid(self):
        """Signature is checked before expiry."""
        other_service = JWTService(secret_key="different-secret-0123456789-abcdefghijkl")
        token = other_service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            expires_delta=timedelta(seconds=-10),
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_token_without_expiry_is_invalid(self):
        token = jwt.encode({"sub": str(self.user_id)}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_unsigned_token_is_invalid(self):
        token = jwt.encode({"sub": str(self.user_id), "exp": 9999999999, "iat": 0}, None, algorithm="none")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)
