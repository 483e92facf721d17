"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/            # Fast, isolated tests (mocks and in-memory stores)
    │   ├── warden/
    │   ├── warden_auth/
    │   ├── warden_config/
    │   └── warden_identity/
    └── integration/     # SQLite-backed persistence and end-to-end flows

Settings are read from the environment; a throwaway JWT secret is
provided here so importing the packages never requires a .env file.
"""

import os

import pytest

from warden_config import clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-key-0123456789-abcdefghijklmnop"

os.environ.setdefault("JWT_SECRET_KEY", TEST_JWT_SECRET)


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Give every test a freshly loaded Settings instance."""
    clear_settings_cache()
    yield
    clear_settings_cache()
