"""Unit tests for application settings and duration parsing."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from gatekeeper_config import Settings, clear_settings_cache, get_settings, parse_duration

SECRET = "unit-test-secret-value-0123456789abcdef"  # NOQA: S105


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any ambient configuration that would leak into Settings()."""
    for name in (
        "JWT_SECRET",
        "JWT_SECRET_KEY",
        "JWT_EXPIRES_IN",
        "BCRYPT_ROUNDS",
        "DATABASE_URL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2h", timedelta(hours=2)),
            ("30m", timedelta(minutes=30)),
            ("45s", timedelta(seconds=45)),
            ("7d", timedelta(days=7)),
            ("1w", timedelta(weeks=1)),
            ("500ms", timedelta(milliseconds=500)),
            ("1.5h", timedelta(minutes=90)),
            (" 2H ", timedelta(hours=2)),
        ],
    )
    def test_parses_unit_suffixes(self, value, expected):
        assert parse_duration(value) == expected

    def test_bare_number_string_is_seconds(self):
        assert parse_duration("90") == timedelta(seconds=90)

    def test_int_is_seconds(self):
        assert parse_duration(3600) == timedelta(hours=1)

    @pytest.mark.parametrize("value", ["", "abc", "2 hours", "h", "-1h", "1x"])
    def test_invalid_format_raises(self, value):
        with pytest.raises(ValueError, match="Invalid duration"):
            parse_duration(value)

    @pytest.mark.parametrize("value", ["0", "0h", 0, -5])
    def test_non_positive_raises(self, value):
        with pytest.raises(ValueError, match="must be positive"):
            parse_duration(value)

    @pytest.mark.parametrize("value", ["999999999y", "99999999999999999999d", 10**20])
    def test_out_of_range_raises(self, value):
        with pytest.raises(ValueError, match="out of range"):
            parse_duration(value)


class TestSettings:
    """Tests for Settings loading and validation."""

    def test_defaults(self, clean_env):
        settings = Settings(jwt_secret_key=SECRET, _env_file=None)

        assert settings.jwt_expires_in == "2h"
        assert settings.jwt_expires_delta == timedelta(hours=2)
        assert settings.bcrypt_rounds == 10
        assert settings.database_url.startswith("sqlite+aiosqlite://")
        assert settings.log_level == "INFO"

    def test_secret_is_required(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_secret_rejected(self, clean_env):
        with pytest.raises(ValidationError, match="cannot be empty"):
            Settings(jwt_secret_key="   ", _env_file=None)

    def test_secret_not_exposed_in_repr(self, clean_env):
        settings = Settings(jwt_secret_key=SECRET, _env_file=None)

        assert SECRET not in repr(settings)
        assert settings.jwt_secret_key.get_secret_value() == SECRET

    def test_reads_secret_from_environment(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", SECRET)

        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key.get_secret_value() == SECRET

    def test_accepts_short_secret_variable_name(self, clean_env):
        clean_env.setenv("JWT_SECRET", SECRET)

        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key.get_secret_value() == SECRET

    def test_expires_in_from_environment(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", SECRET)
        clean_env.setenv("JWT_EXPIRES_IN", "15m")

        settings = Settings(_env_file=None)

        assert settings.jwt_expires_delta == timedelta(minutes=15)

    def test_invalid_expires_in_rejected(self, clean_env):
        with pytest.raises(ValidationError, match="Invalid duration"):
            Settings(jwt_secret_key=SECRET, jwt_expires_in="soon", _env_file=None)

    def test_huge_expires_in_rejected(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", SECRET)
        clean_env.setenv("JWT_EXPIRES_IN", "999999999y")

        with pytest.raises(ValidationError, match="out of range"):
            Settings(_env_file=None)

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_out_of_range_rejected(self, clean_env, rounds):
        with pytest.raises(ValidationError):
            Settings(jwt_secret_key=SECRET, bcrypt_rounds=rounds, _env_file=None)

    def test_settings_are_frozen(self, clean_env):
        settings = Settings(jwt_secret_key=SECRET, _env_file=None)

        with pytest.raises(ValidationError):
            settings.bcrypt_rounds = 12


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_cached_instance(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", SECRET)
        clear_settings_cache()

        try:
            assert get_settings() is get_settings()
        finally:
            clear_settings_cache()

    def test_clear_cache_reloads(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", SECRET)
        clear_settings_cache()
        first = get_settings()

        clean_env.setenv("JWT_EXPIRES_IN", "1h")
        clear_settings_cache()
        second = get_settings()

        try:
            assert first is not second
            assert second.jwt_expires_delta == timedelta(hours=1)
        finally:
            clear_settings_cache()
