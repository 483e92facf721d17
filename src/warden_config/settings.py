"""Process configuration read from the environment.

Precedence, highest first:
1. OS environment variables
2. the file named by ``WARDEN_ENV_FILE`` (relative paths resolve against
   the project root)
3. ``config/.env.dev``, then ``config/.env``
4. field defaults
"""

from __future__ import annotations

import os
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "WARDEN_ENV_FILE"
# HS256 keys shorter than the digest weaken the MAC
MIN_SECRET_KEY_LENGTH = 32

_PROJECT_MARKERS = ("config", "pyproject.toml")


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _PROJECT_MARKERS):
            return candidate
    return Path.cwd()


def get_config_dir() -> Path:
    """Directory holding the optional ``.env`` files."""
    return _project_root() / "config"


def _env_file() -> Path | None:
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]

    return next((path for path in candidates if path.is_file()), None)


class Settings(BaseSettings):
    """Typed view of the process environment.

    Only ``JWT_SECRET_KEY`` is mandatory; loading fails without it.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jwt_secret_key: SecretStr
    app_name: str = "Warden"

    jwt_access_token_expire_minutes: int = Field(default=60, gt=0)
    session_expire_minutes: int = Field(default=60, gt=0)

    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    password_min_length: int = Field(default=8, ge=1)

    database_url: str = "sqlite+aiosqlite:///./warden.db"
    database_echo: bool = False

    log_level: str = "INFO"

    @field_validator("jwt_secret_key")
    @classmethod
    def _check_secret_length(cls, v: SecretStr) -> SecretStr:
        if len(v.get_secret_value()) < MIN_SECRET_KEY_LENGTH:
            msg = f"JWT_SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters"
            raise ValueError(msg)
        return v

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.jwt_access_token_expire_minutes)

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(minutes=self.session_expire_minutes)


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the cached Settings so the next call reloads the environment."""
    get_settings.cache_clear()
