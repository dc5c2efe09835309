"""Prerelease identifier composition.

This module stamps a patch number with a release channel and the
current UTC calendar date, e.g. ``0-dev.20240305``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import cast

from core.clock import Clock
from core.constants import SUPPORTED_CHANNELS
from core.errors import InvalidChannelError
from core.types import Channel


def parse_channel(raw_channel: str) -> Channel:
    """Validate a release channel tag.

    Args:
        raw_channel: Channel value supplied by the caller.

    Returns:
        The validated channel.

    Raises:
        InvalidChannelError: If the tag is not a supported channel.
    """
    if raw_channel not in SUPPORTED_CHANNELS:
        raise InvalidChannelError(
            f"Unexpected tag name '{raw_channel}'. "
            f"Supported channels: {', '.join(SUPPORTED_CHANNELS)}."
        )
    return cast(Channel, raw_channel)


def compose_prerelease_identifier(channel: Channel, patch: str, now: datetime) -> str:
    """Compose ``<patch>-<channel>.<YYYYMMDD>`` for one instant.

    Args:
        channel: Release channel tag.
        patch: Patch digits shared by both files.
        now: Instant to stamp; naive values are treated as UTC.

    Returns:
        Prerelease identifier string.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    utc_now = now.astimezone(timezone.utc)
    date_stamp = f"{utc_now.year:04d}{utc_now.month:02d}{utc_now.day:02d}"
    return f"{patch}-{channel}.{date_stamp}"


def build_prerelease_identifier(channel: Channel, patch: str, clock: Clock) -> str:
    """Compose a prerelease identifier using the instant from a clock."""
    return compose_prerelease_identifier(channel, patch, clock())
