"""Process-wide configuration for Gatekeeper.

Values come from the OS environment first, then from the first .env file
found: the path in GATEKEEPER_ENV_FILE, config/.env.dev, or config/.env.
Variable names carry no prefix (JWT_SECRET_KEY, BCRYPT_ROUNDS, ...).
"""

from __future__ import annotations

import os
import re
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Unit suffixes accepted in duration strings such as "2h" or "30m"
_DURATION_UNITS: dict[str, timedelta] = {
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
    "w": timedelta(weeks=1),
    "y": timedelta(days=365.25),
}

_DURATION_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h|d|w|y)?\s*$", re.I)


def parse_duration(value: str | int | float) -> timedelta:
    """Parse a duration such as ``"2h"``, ``"45m"`` or ``3600`` into a timedelta.

    Bare numbers are seconds. Raises ``ValueError`` for anything else,
    including zero or negative durations.
    """
    if isinstance(value, (int, float)):
        amount, unit = float(value), "s"
    else:
        match = _DURATION_PATTERN.match(value)
        if match is None:
            msg = f"Invalid duration: {value!r}"
            raise ValueError(msg)
        amount = float(match.group(1))
        unit = (match.group(2) or "s").lower()

    try:
        delta = _DURATION_UNITS[unit] * amount
    except OverflowError as e:
        msg = f"Duration out of range: {value!r}"
        raise ValueError(msg) from e

    if delta <= timedelta(0):
        msg = f"Duration must be positive: {value!r}"
        raise ValueError(msg)
    return delta


def _find_project_root() -> Path:
    """Walk up from this file to the first directory holding config/ or pyproject.toml."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return Path.cwd()


def _resolve_env_file_path() -> Path | None:
    """Pick the first .env file that exists.

    GATEKEEPER_ENV_FILE wins when set (relative paths are taken from the
    project root), then config/.env.dev, then config/.env.
    """
    root = _find_project_root()
    candidates: list[Path] = []

    override = os.environ.get("GATEKEEPER_ENV_FILE")
    if override:
        path = Path(override)
        candidates.append(path if path.is_absolute() else root / path)

    candidates += [root / "config" / ".env.dev", root / "config" / ".env"]

    return next((path for path in candidates if path.exists()), None)


class Settings(BaseSettings):
    """Immutable settings snapshot.

    Only the signing secret is required; every other field has a default
    suitable for local development.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Token signing secret, required
    jwt_secret_key: SecretStr = Field(
        validation_alias=AliasChoices("jwt_secret_key", "jwt_secret"),
    )

    # Application
    app_name: str = "Gatekeeper"

    # Token lifetime, e.g. "2h", "30m", "7d"
    jwt_expires_in: str = "2h"

    # Password hashing work factor
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Database
    database_url: str = "sqlite+aiosqlite:///./gatekeeper.db"

    # API (API_ prefix)
    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: list[str] = Field(default_factory=list)

    # Logging
    log_level: str = "INFO"

    @field_validator("jwt_secret_key")
    @classmethod
    def _validate_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator("jwt_expires_in")
    @classmethod
    def _validate_expires_in(cls, v: str) -> str:
        parse_duration(v)
        return v

    @property
    def jwt_expires_delta(self) -> timedelta:
        """Token lifetime as a timedelta."""
        return parse_duration(self.jwt_expires_in)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings on first use and return the same instance afterwards."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the cached instance so the next call reloads from the environment."""
    get_settings.cache_clear()
