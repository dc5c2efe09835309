"""Core constants used across prerelease-sync modules.

This module centralizes declaration names and format settings.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

SUPPORTED_CHANNELS = ("dev", "insiders")
DEFAULT_MAJOR_MINOR_NAME = "versionMajorMinor"
DEFAULT_VERSION_NAME = "version"
MANIFEST_INDENT = 4
MANIFEST_VERSION_FIELD = "version"
DEV_MARKER = "-dev"
TEXT_ENCODING = "utf-8"
CLI_PROG_NAME = "prerelease-sync"
USAGE_TEXT = (
    "Usage:\n"
    f"\t{CLI_PROG_NAME} <dev|insiders> <package.json location> <file containing version>"
)
