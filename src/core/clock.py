"""Clock providers for time-dependent operations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """Build a clock that always returns one instant.

    Args:
        instant: Instant returned on every call.

    Returns:
        Zero-argument clock callable.
    """
    return lambda: instant
