"""
Pytest configuration for gatekeeper_identity domain tests.

This conftest provides fixtures specific to the gatekeeper_identity
domain (users and their persistence).
"""

import pytest

from gatekeeper_identity.domain.user import User

# Not a real bcrypt hash; identity code never inspects it
TEST_PASSWORD_HASH = "$2b$04$abcdefghijklmnopqrstuuM3.gXJ1o7a0x0E9Q2m7aS0a1c1pQnYy"  # NOQA: S105


@pytest.fixture
def test_user() -> User:
    """Create a standard test user."""
    return User.create("ada@x.io", "Ada", TEST_PASSWORD_HASH)
