"""Email value object: the lookup key for identities."""

import re
from dataclasses import dataclass

from warden_identity.exceptions import InvalidEmailError

# local@domain.tld with a two-letter-or-longer alphabetic TLD
_ADDRESS = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}")
# RFC 5321 path limit
MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """A lower-cased, whitespace-trimmed address of the usual shape.

    Two spellings that differ only in case compare equal, which is what
    makes email uniqueness case-insensitive.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidEmailError("Email cannot be empty")

        canonical = self.value.strip().lower()
        if len(canonical) > MAX_EMAIL_LENGTH or _ADDRESS.fullmatch(canonical) is None:
            raise InvalidEmailError(f"Invalid email format: {self.value}")

        object.__setattr__(self, "value", canonical)

    @property
    def domain(self) -> str:
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        return self.value
