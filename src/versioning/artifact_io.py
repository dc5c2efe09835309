"""Manifest and source file persistence helpers.

This module isolates file IO for the two synchronized artifacts.
Text is read and written without newline translation so untouched
lines keep their original bytes.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.constants import MANIFEST_VERSION_FIELD, TEXT_ENCODING
from core.errors import ArtifactIOError, ManifestFormatError
from core.types import ManifestDocument, SourceDocument

_UTF8_BOM = "\ufeff"


def read_manifest(manifest_path: Path) -> ManifestDocument:
    """Read and validate a manifest JSON file.

    A leading UTF-8 byte order mark is ignored when decoding the payload.

    Args:
        manifest_path: Manifest location.

    Returns:
        Parsed manifest document.

    Raises:
        ArtifactIOError: If the file cannot be read.
        ManifestFormatError: If the payload is not an object with a version string.
    """
    raw_text = _read_text(manifest_path)
    try:
        payload = json.loads(raw_text.removeprefix(_UTF8_BOM))
    except json.JSONDecodeError as error:
        raise ManifestFormatError(
            f"Failed to parse manifest at {manifest_path}: {error.msg} "
            f"(line {error.lineno}, column {error.colno})."
        ) from error
    if not isinstance(payload, dict):
        raise ManifestFormatError(
            f"Manifest at {manifest_path} must contain a JSON object, "
            f"got {type(payload).__name__}."
        )
    if not isinstance(payload.get(MANIFEST_VERSION_FIELD), str):
        raise ManifestFormatError(
            f"Manifest at {manifest_path} must have a string "
            f"'{MANIFEST_VERSION_FIELD}' field."
        )
    return ManifestDocument(path=manifest_path, fields=payload, raw_text=raw_text)


def read_source(source_path: Path) -> SourceDocument:
    """Read the source file that declares the version constants.

    Raises:
        ArtifactIOError: If the file cannot be read.
    """
    return SourceDocument(path=source_path, text=_read_text(source_path))


def write_text_artifact(artifact_path: Path, text: str) -> None:
    """Write artifact text exactly as given.

    Args:
        artifact_path: Destination file.
        text: Full file contents.

    Raises:
        ArtifactIOError: If the file cannot be written.
    """
    try:
        with artifact_path.open("w", encoding=TEXT_ENCODING, newline="") as handle:
            handle.write(text)
    except OSError as error:
        raise ArtifactIOError(f"Failed to write {artifact_path}: {error.strerror}.") from error


def _read_text(artifact_path: Path) -> str:
    if not artifact_path.is_file():
        raise ArtifactIOError(
            f"Failed to read {artifact_path}: file does not exist. "
            "Check the path arguments."
        )
    try:
        with artifact_path.open("r", encoding=TEXT_ENCODING, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as error:
        raise ArtifactIOError(f"Failed to read {artifact_path}: {error}.") from error
