"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (hasher, tokens, config, service)
    ├── gatekeeper_identity/   # Identity domain tests (users, persistence)
    │   ├── unit/
    │   └── integration/       # Repository against in-memory SQLite
    └── integration/
        └── api/               # HTTP round trips against a temporary SQLite file
"""

import pytest
from pydantic import SecretStr

from gatekeeper_config import Settings, clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"  # NOQA: S105


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Clear cached settings so every session starts from a fresh load."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for tests: fixed secret, cheap bcrypt, throwaway database."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        bcrypt_rounds=4,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'gatekeeper-test.db'}",
        api_debug=True,
        log_level="DEBUG",
    )
