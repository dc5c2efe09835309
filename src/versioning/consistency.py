"""Cross-file version consistency validation."""

from __future__ import annotations

from core.config import PrereleaseConfig
from core.types import ConsistentVersions, ManifestDocument, SourceDocument
from versioning.source_extractor import verify_source_versions
from versioning.version_parser import parse_manifest_version


def validate_consistency(
    manifest: ManifestDocument,
    source: SourceDocument,
    config: PrereleaseConfig,
) -> ConsistentVersions:
    """Validate that manifest and source record the same version.

    Args:
        manifest: Parsed manifest document.
        source: Source document declaring version constants.
        config: Runtime configuration with declaration names.

    Returns:
        Shared version components and the version template lookup.

    Raises:
        MalformedVersionError: If the manifest version cannot be parsed.
        PatternNotFoundError: If a source declaration is missing.
        VersionSkewError: If the two files disagree.
    """
    triple = parse_manifest_version(manifest.version)
    version_declaration = verify_source_versions(source, triple, config)
    return ConsistentVersions(triple=triple, version_declaration=version_declaration)
