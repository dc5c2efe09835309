"""Manifest version string parsing."""

from __future__ import annotations

import re

from core.errors import MalformedVersionError
from core.types import VersionTriple

_MANIFEST_VERSION_PATTERN = re.compile(r"(\d+\.\d+)\.(\d+)($|-)")


def parse_manifest_version(version: object) -> VersionTriple:
    """Extract major-minor and patch from a manifest version string.

    Args:
        version: Manifest ``version`` value, e.g. ``4.2.0`` or ``4.2.0-dev.20240305``.

    Returns:
        Parsed version components.

    Raises:
        MalformedVersionError: If the value is not ``major.minor.patch``.
    """
    match = _MANIFEST_VERSION_PATTERN.search(version) if isinstance(version, str) else None
    if match is None:
        raise MalformedVersionError(
            f"Manifest 'version' should match {_MANIFEST_VERSION_PATTERN.pattern}, "
            f"got {version!r}."
        )
    return VersionTriple(major_minor=match.group(1), patch=match.group(2))
