"""Shared typed models.

This module defines immutable data models passed between the parser,
extractor, rewriter, and orchestrator to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Mapping

from core.constants import MANIFEST_VERSION_FIELD

Channel = Literal["dev", "insiders"]
LookupStatus = Literal["found", "not_found", "malformed"]


@dataclass(frozen=True)
class VersionTriple:
    """Version components shared by the manifest and source files.

    Attributes:
        major_minor: The ``M.N`` prefix, e.g. ``4.2``.
        patch: The patch digits, e.g. ``0``.
    """

    major_minor: str
    patch: str


@dataclass(frozen=True)
class ManifestDocument:
    """Parsed manifest file.

    Attributes:
        path: Manifest location on disk.
        fields: Decoded JSON object in file order.
        raw_text: Text exactly as read from disk.
    """

    path: Path
    fields: Mapping[str, Any]
    raw_text: str

    @property
    def version(self) -> str:
        """Return the manifest version field."""
        return self.fields[MANIFEST_VERSION_FIELD]


@dataclass(frozen=True)
class SourceDocument:
    """Source file that declares the version constants.

    Attributes:
        path: Source location on disk.
        text: Text exactly as read from disk, line endings included.
    """

    path: Path
    text: str


@dataclass(frozen=True)
class DeclarationLookup:
    """Tagged result of looking up one declaration in source text.

    Attributes:
        declaration: Declared constant name.
        status: Whether the declaration was found, absent, or unparseable.
        value: Captured value for found declarations.
        suffix: Text following the patch in a version template, if any.
        line_number: 1-based line of the declaration.
        span: Character offsets of the declaration inside the source text.
        detail: Explanation for malformed declarations.
    """

    declaration: str
    status: LookupStatus
    value: str | None = None
    suffix: str | None = None
    line_number: int | None = None
    span: tuple[int, int] | None = None
    detail: str | None = None


@dataclass(frozen=True)
class ConsistentVersions:
    """Validated version state shared by both files.

    Attributes:
        triple: Version components both files agree on.
        version_declaration: Found lookup of the version template declaration.
    """

    triple: VersionTriple
    version_declaration: DeclarationLookup


@dataclass(frozen=True)
class PrereleaseRequest:
    """Inputs for one prerelease configuration run.

    Attributes:
        channel: Raw release channel value.
        manifest_path: Manifest JSON location.
        source_path: Source file location.
    """

    channel: str
    manifest_path: Path
    source_path: Path


@dataclass(frozen=True)
class PrereleaseResult:
    """Outcome of a successful prerelease configuration run.

    Attributes:
        channel: Validated release channel.
        prerelease_identifier: Composed ``<patch>-<channel>.<date>`` suffix.
        version: New manifest version string.
        manifest_path: Rewritten manifest location.
        source_path: Rewritten source location.
    """

    channel: Channel
    prerelease_identifier: str
    version: str
    manifest_path: Path
    source_path: Path
