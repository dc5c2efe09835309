"""Public SDK surface for prerelease-sync.

This module provides a stable import path for scripted callers.
It re-exports the workflow entry point and typed models.
"""

from __future__ import annotations

from core.clock import Clock, fixed_clock, system_clock
from core.config import PrereleaseConfig
from core.errors import (
    ArtifactIOError,
    InvalidChannelError,
    MalformedVersionError,
    ManifestFormatError,
    NoOpRewriteError,
    PatternNotFoundError,
    PrereleaseConfigError,
    PrereleaseError,
    VersionSkewError,
)
from core.types import PrereleaseRequest, PrereleaseResult, VersionTriple
from versioning.orchestrator import configure_prerelease
from versioning.prerelease import compose_prerelease_identifier
from versioning.version_parser import parse_manifest_version

__all__ = [
    "ArtifactIOError",
    "Clock",
    "InvalidChannelError",
    "MalformedVersionError",
    "ManifestFormatError",
    "NoOpRewriteError",
    "PatternNotFoundError",
    "PrereleaseConfig",
    "PrereleaseConfigError",
    "PrereleaseError",
    "PrereleaseRequest",
    "PrereleaseResult",
    "VersionSkewError",
    "VersionTriple",
    "compose_prerelease_identifier",
    "configure_prerelease",
    "fixed_clock",
    "parse_manifest_version",
    "system_clock",
]
