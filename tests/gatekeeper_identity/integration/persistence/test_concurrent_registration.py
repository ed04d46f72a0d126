"""Concurrent registrations for one email against a shared SQLite file."""

import asyncio
from datetime import timedelta

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from gatekeeper.application.services import AuthenticationService
from gatekeeper.domain.shared.exceptions import ConflictError
from gatekeeper_auth import JWTService, PasswordHashingService
from gatekeeper_identity.infrastructure.persistence.sqlalchemy import (
    IdentityBase,
    UserRepositorySQLAlchemy,
)

CONCURRENT_REQUESTS = 5
TEST_SECRET = "concurrency-test-secret-0123456789abcdef"  # NOQA: S105


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    """Session factory on a file database; every session gets its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'race.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.mark.integration
class TestConcurrentRegistration:
    """Racing registrations for one email."""

    def setup_method(self):
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = JWTService(TEST_SECRET, expires_in=timedelta(minutes=5))

    async def _register(self, session_maker, name: str) -> str:
        async with session_maker() as session:
            service = AuthenticationService(
                user_repository=UserRepositorySQLAlchemy(session),
                password_service=self.password_service,
                jwt_service=self.jwt_service,
            )
            try:
                await service.register(name=name, email="ada@x.io", password="Str0ng!Pass")
                await session.commit()
            except ConflictError:
                await session.rollback()
                return "conflict"
        return "ok"

    @pytest.mark.asyncio
    async def test_exactly_one_registration_wins(self, session_maker):
        """One caller succeeds; every other caller sees a conflict."""
        # Act
        outcomes = await asyncio.gather(
            *(self._register(session_maker, f"Ada {i}") for i in range(CONCURRENT_REQUESTS)),
        )

        # Assert
        assert outcomes.count("ok") == 1
        assert outcomes.count("conflict") == CONCURRENT_REQUESTS - 1

        async with session_maker() as session:
            stored = await UserRepositorySQLAlchemy(session).find_by_email("ada@x.io")
        assert stored is not None
