"""bcrypt-backed password digests.

Digests are self-describing ``$2b$<rounds>$<salt><checksum>`` strings, so
verification needs nothing but the stored digest.
"""

import bcrypt

from warden_auth.exceptions import (
    HashingError,
    PasswordTooLongError,
    PasswordTooShortError,
)

ENCODING = "utf-8"


class PasswordHashingService:
    """Hash and check passwords with a configurable bcrypt work factor.

    ``hash`` salts every call, so one password yields a different digest
    each time while all of them verify. ``verify`` never raises: a wrong
    password and a corrupt digest both come back as False.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> digest = hasher.hash("correct horse")
    >>> hasher.verify("correct horse", digest)
    True
    """

    MIN_LENGTH = 8
    # bcrypt ignores everything past this many input bytes
    MAX_BYTES = 72

    _DUMMY_PASSWORD = "warden_timing_dummy"

    def __init__(self, rounds: int = 12, min_length: int = MIN_LENGTH):
        """
        Parameters
        ----------
        rounds
            bcrypt cost (log2 of the key-expansion iterations).
        min_length
            Shortest password, in characters, that registration accepts.
        """
        self._rounds = rounds
        self._min_length = min_length
        # Every unknown-account login must cost exactly one checkpw
        self._dummy_hash = bcrypt.hashpw(
            self._DUMMY_PASSWORD.encode(ENCODING),
            bcrypt.gensalt(rounds=rounds),
        ).decode(ENCODING)

    @property
    def min_length(self) -> int:
        return self._min_length

    def hash(self, password: str) -> str:
        """Return a fresh salted digest of ``password``.

        Raises
        ------
        PasswordTooShortError, PasswordTooLongError
            ``password`` fails ``validate_strength``.
        HashingError
            bcrypt could not produce a digest.
        """
        self.validate_strength(password)
        try:
            digest = bcrypt.hashpw(
                password.encode(ENCODING),
                bcrypt.gensalt(rounds=self._rounds),
            )
        except (ValueError, TypeError) as e:
            raise HashingError(f"Password hashing failed: {e}") from e
        return digest.decode(ENCODING)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored digest in constant time."""
        try:
            return bcrypt.checkpw(password.encode(ENCODING), password_hash.encode(ENCODING))
        except (ValueError, TypeError, AttributeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend one full verification and report failure.

        Login calls this when no account matches, so a miss costs the same
        time as a wrong password.
        """
        self.verify(password, self._dummy_hash)
        return False

    def validate_strength(self, password: str) -> None:
        """Reject passwords that are too short or longer than bcrypt reads."""
        if not password or len(password) < self._min_length:
            raise PasswordTooShortError(self._min_length)
        if len(password.encode(ENCODING)) > self.MAX_BYTES:
            raise PasswordTooLongError(self.MAX_BYTES)

    def needs_rehash(self, password_hash: str) -> bool:
        """True when ``password_hash`` was made with a different cost.

        Unparseable digests also report True so they get replaced on the
        next successful login.
        """
        fields = password_hash.split("$") if password_hash else []
        if len(fields) < 4 or not fields[2].isdigit():
            return True
        return int(fields[2]) != self._rounds
