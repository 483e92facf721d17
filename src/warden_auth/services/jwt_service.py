"""HS256 signed tokens with an embedded issue time and expiry."""

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from warden_auth.exceptions import ExpiredTokenError, InvalidTokenError
from warden_auth.schemas import TokenPayload

# iat/exp are set by issue(); aud/nbf would be validated on decode
_RESERVED_CLAIMS = frozenset({"iat", "exp", "nbf", "aud"})


class JWTService:
    """Issue and check self-contained bearer tokens.

    Nothing is stored: a token is good while its HMAC matches the
    configured secret and its ``exp`` lies in the future.

    Examples
    --------
    >>> tokens = JWTService(secret_key=secret)
    >>> token = tokens.issue({"sub": "42"}, timedelta(minutes=5))
    >>> tokens.verify_token(token).claims
    {'sub': '42'}
    """

    DEFAULT_ACCESS_EXPIRE = timedelta(hours=1)
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire: timedelta = DEFAULT_ACCESS_EXPIRE,
    ):
        """
        Parameters
        ----------
        secret_key
            HMAC signing key shared by every process that verifies tokens.
        access_token_expire
            Lifetime given to ``create_access_token`` tokens.
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = access_token_expire

    @property
    def access_token_expire(self) -> timedelta:
        return self._access_expire

    def issue(self, claims: Mapping[str, Any], ttl: timedelta) -> str:
        """Sign ``claims`` with ``iat = now`` and ``exp = now + ttl``.

        ``ttl`` may be zero or negative, which yields a token that
        ``verify_token`` already reports as expired.
        """
        clash = _RESERVED_CLAIMS.intersection(claims)
        if clash:
            msg = f"Claims may not set reserved keys: {sorted(clash)}"
            raise ValueError(msg)

        issued_at = datetime.now(tz=timezone.utc)
        body = dict(claims, iat=issued_at, exp=issued_at + ttl)
        return jwt.encode(body, self._secret_key, algorithm=self.ALGORITHM)

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Token for one identity carrying ``sub`` and ``email`` claims."""
        ttl = self._access_expire if expires_delta is None else expires_delta
        return self.issue({"sub": str(user_id), "email": email}, ttl)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode ``token`` after checking its signature, then its expiry.

        A token that is both forged and stale is therefore reported as
        invalid rather than expired.

        Raises
        ------
        InvalidTokenError
            Bad signature, wrong algorithm, missing ``iat``/``exp`` or a
            structure that does not decode.
        ExpiredTokenError
            Genuine signature, but ``exp`` is not in the future.
        """
        try:
            decoded = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            issued_at = datetime.fromtimestamp(decoded.pop("iat"), tz=timezone.utc)
            expires_at = datetime.fromtimestamp(decoded.pop("exp"), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        return TokenPayload(claims=decoded, issued_at=issued_at, expires_at=expires_at)
