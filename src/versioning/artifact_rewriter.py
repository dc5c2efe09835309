"""In-memory rewrites of the manifest and source artifacts.

This module produces the updated manifest JSON and source text.
It never touches the file system so both transforms can succeed
before any write happens.
"""

from __future__ import annotations

import json

from core.config import PrereleaseConfig
from core.constants import DEV_MARKER, MANIFEST_VERSION_FIELD
from core.errors import NoOpRewriteError, PatternNotFoundError
from core.types import DeclarationLookup, ManifestDocument, SourceDocument


def build_prerelease_version(major_minor: str, prerelease_identifier: str) -> str:
    """Join major-minor and identifier into a full version string."""
    return f"{major_minor}.{prerelease_identifier}"


def rewrite_manifest(
    manifest: ManifestDocument,
    major_minor: str,
    prerelease_identifier: str,
    config: PrereleaseConfig,
) -> str:
    """Render the manifest with its version replaced.

    Field order and every non-version field are preserved. A trailing
    newline is emitted only when the original file ended with one.

    Args:
        manifest: Parsed manifest document.
        major_minor: Validated ``M.N`` prefix.
        prerelease_identifier: Composed prerelease identifier.
        config: Runtime configuration with manifest indentation.

    Returns:
        Updated manifest JSON text.
    """
    payload = dict(manifest.fields)
    payload[MANIFEST_VERSION_FIELD] = build_prerelease_version(major_minor, prerelease_identifier)
    rendered = json.dumps(payload, indent=config.manifest_indent, ensure_ascii=False)
    if manifest.raw_text.endswith("\n"):
        rendered += "\n"
    return rendered


def rewrite_source(
    source: SourceDocument,
    declaration: DeclarationLookup,
    prerelease_identifier: str,
    config: PrereleaseConfig,
) -> str:
    """Replace the version template declaration with a prerelease one.

    Args:
        source: Source document being rewritten.
        declaration: Found lookup of the version template declaration.
        prerelease_identifier: Composed prerelease identifier.
        config: Runtime configuration with declaration names.

    Returns:
        Updated source text; all other characters are unchanged.

    Raises:
        PatternNotFoundError: If the declaration lookup carries no span.
        NoOpRewriteError: If the file would be unchanged or was already stamped.
    """
    if declaration.status != "found" or declaration.span is None:
        raise PatternNotFoundError(
            f"Cannot rewrite {source.path}: '{declaration.declaration}' was not located."
        )
    start, end = declaration.span
    replacement = (
        f"export const {config.version_name} = "
        f"`${{{config.major_minor_name}}}.{prerelease_identifier}`;"
    )
    updated = source.text[:start] + replacement + source.text[end:]
    if updated == source.text:
        raise NoOpRewriteError(
            f"'{source.path}' was not updated while configuring prerelease "
            f"'{prerelease_identifier}'. Ensure that you have not already run this tool; "
            f"otherwise, erase your changes using 'git checkout -- \"{source.path}\"'."
        )
    if declaration.suffix not in (None, DEV_MARKER):
        raise NoOpRewriteError(
            f"'{source.path}' is already configured for prerelease "
            f"'{declaration.value}{declaration.suffix}'. Erase your changes using "
            f"'git checkout -- \"{source.path}\"' before configuring a new prerelease."
        )
    return updated
