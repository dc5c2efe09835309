"""Prerelease configuration workflow.

This module wires parsing, validation, composition, and rewriting
into one run. Both files are transformed in memory before either is
written, so any validation failure leaves the disk untouched.
"""

from __future__ import annotations

from core.clock import Clock, system_clock
from core.config import PrereleaseConfig
from core.logging_config import get_logger
from core.types import PrereleaseRequest, PrereleaseResult
from versioning.artifact_io import read_manifest, read_source, write_text_artifact
from versioning.artifact_rewriter import (
    build_prerelease_version,
    rewrite_manifest,
    rewrite_source,
)
from versioning.consistency import validate_consistency
from versioning.prerelease import build_prerelease_identifier, parse_channel

_LOGGER = get_logger(__name__)


def configure_prerelease(
    request: PrereleaseRequest,
    config: PrereleaseConfig | None = None,
    clock: Clock = system_clock,
) -> PrereleaseResult:
    """Stamp manifest and source files with a prerelease version.

    Args:
        request: Channel and artifact paths for this run.
        config: Optional runtime configuration, defaults when omitted.
        clock: Source of the current instant for the date stamp.

    Returns:
        Summary of the written prerelease version.

    Raises:
        PrereleaseError: If any validation or IO step fails.
    """
    resolved_config = config or PrereleaseConfig.from_defaults()
    channel = parse_channel(request.channel)
    manifest = read_manifest(request.manifest_path)
    source = read_source(request.source_path)
    versions = validate_consistency(manifest, source, resolved_config)
    _LOGGER.info(
        "versions_consistent",
        major_minor=versions.triple.major_minor,
        patch=versions.triple.patch,
        source_line=versions.version_declaration.line_number,
    )
    prerelease_identifier = build_prerelease_identifier(channel, versions.triple.patch, clock)
    updated_source = rewrite_source(
        source,
        versions.version_declaration,
        prerelease_identifier,
        resolved_config,
    )
    updated_manifest = rewrite_manifest(
        manifest,
        versions.triple.major_minor,
        prerelease_identifier,
        resolved_config,
    )
    write_text_artifact(request.manifest_path, updated_manifest)
    write_text_artifact(request.source_path, updated_source)
    version = build_prerelease_version(versions.triple.major_minor, prerelease_identifier)
    _LOGGER.info(
        "prerelease_configured",
        channel=channel,
        version=version,
        manifest_path=str(request.manifest_path),
        source_path=str(request.source_path),
    )
    return PrereleaseResult(
        channel=channel,
        prerelease_identifier=prerelease_identifier,
        version=version,
        manifest_path=request.manifest_path,
        source_path=request.source_path,
    )
