"""Prerelease-sync exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each step of the synchronization raises a specific error type so the
CLI can report misuse and stale-file failures distinctly.
"""

from __future__ import annotations


class PrereleaseError(Exception):
    """Base exception for all prerelease-sync failures."""


class PrereleaseConfigError(PrereleaseError):
    """Raised for invalid runtime configuration."""


class InvalidChannelError(PrereleaseError):
    """Raised when the release channel is not a supported tag."""


class MalformedVersionError(PrereleaseError):
    """Raised when a manifest version string is not major.minor.patch."""


class PatternNotFoundError(PrereleaseError):
    """Raised when a version declaration is missing from the source file."""


class VersionSkewError(PrereleaseError):
    """Raised when manifest and source files record different versions."""

    def __init__(
        self,
        component: str,
        source_path: str,
        source_value: str,
        manifest_value: str,
    ) -> None:
        self.component = component
        self.source_path = source_path
        self.source_value = source_value
        self.manifest_value = manifest_value
        super().__init__(
            f"{component} does not match. "
            f"{source_path}: '{source_value}'; manifest: '{manifest_value}'."
        )


class NoOpRewriteError(PrereleaseError):
    """Raised when rewriting the source file would not change it."""


class ArtifactIOError(PrereleaseError):
    """Raised when a manifest or source file cannot be read or written."""


class ManifestFormatError(PrereleaseError):
    """Raised when the manifest is not a JSON object with a version string."""
