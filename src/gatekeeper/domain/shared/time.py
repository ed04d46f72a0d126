"""Clock helper shared by the domain and persistence layers."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(tz=timezone.utc)
