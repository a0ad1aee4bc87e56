from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it easily.
    """
    return datetime.now(timezone.utc)


def current_year_prefix() -> str:
    return f"{now_utc().year:04d}"
