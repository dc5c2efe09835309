"""Unit tests for in-memory artifact rewrites."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.config import PrereleaseConfig
from core.errors import NoOpRewriteError, PatternNotFoundError
from core.types import DeclarationLookup, ManifestDocument, SourceDocument
from versioning.artifact_rewriter import rewrite_manifest, rewrite_source
from versioning.source_extractor import find_version_template_declaration
from versioning.version_parser import parse_manifest_version

_CONFIG = PrereleaseConfig.from_defaults()


def _source(version_line: str, newline: str = "\n") -> SourceDocument:
    lines = [
        "namespace ts {",
        '    export const versionMajorMinor = "4.2";',
        f"    {version_line}",
        "}",
        "",
    ]
    return SourceDocument(path=Path("corePublic.ts"), text=newline.join(lines))


def _manifest(raw_text: str) -> ManifestDocument:
    fields = json.loads(raw_text)
    return ManifestDocument(path=Path("package.json"), fields=fields, raw_text=raw_text)


def _rewrite(source: SourceDocument, identifier: str) -> str:
    declaration = find_version_template_declaration(source.text, _CONFIG)
    return rewrite_source(source, declaration, identifier, _CONFIG)


def test_rewrite_source_replaces_only_version_declaration() -> None:
    """Only the version template declaration should change."""
    source = _source("export const version = `${versionMajorMinor}.0`;")

    updated = _rewrite(source, "0-dev.20240305")

    original_lines = source.text.splitlines()
    updated_lines = updated.splitlines()
    assert updated_lines[2] == "    export const version = `${versionMajorMinor}.0-dev.20240305`;"
    assert [row for index, row in enumerate(updated_lines) if index != 2] == [
        row for index, row in enumerate(original_lines) if index != 2
    ]


def test_rewrite_source_replaces_dev_marker() -> None:
    """Nightly dev markers should be replaced rather than extended."""
    source = _source("export const version = `${versionMajorMinor}.0-dev`;")

    updated = _rewrite(source, "0-insiders.20240305")

    assert "`${versionMajorMinor}.0-insiders.20240305`;" in updated and ".0-dev`" not in updated


def test_rewrite_source_preserves_crlf_line_endings() -> None:
    """Untouched lines should keep their original bytes, line endings included."""
    source = _source("export const version = `${versionMajorMinor}.0`;", newline="\r\n")

    updated = _rewrite(source, "0-dev.20240305")

    assert updated.count("\r\n") == source.text.count("\r\n")
    assert "\n" not in updated.replace("\r\n", "")


def test_rewrite_source_rejects_identical_reapplication() -> None:
    """Reapplying the same identifier should be reported as a no-op."""
    source = _source("export const version = `${versionMajorMinor}.0-dev.20240305`;")

    with pytest.raises(NoOpRewriteError) as error_info:
        _rewrite(source, "0-dev.20240305")

    assert 'git checkout -- "corePublic.ts"' in str(error_info.value)


def test_rewrite_source_rejects_already_stamped_declaration() -> None:
    """A previously stamped file should not be restamped on a later date."""
    source = _source("export const version = `${versionMajorMinor}.0-dev.20240305`;")

    with pytest.raises(NoOpRewriteError) as error_info:
        _rewrite(source, "0-dev.20240306")

    assert "0-dev.20240305" in str(error_info.value)


def test_rewrite_source_requires_found_declaration() -> None:
    """A lookup without a located declaration cannot be rewritten."""
    source = _source("export const other = 1;")
    missing = DeclarationLookup(declaration="version", status="not_found")

    with pytest.raises(PatternNotFoundError):
        rewrite_source(source, missing, "0-dev.20240305", _CONFIG)


def test_rewrite_manifest_updates_version_and_keeps_field_order() -> None:
    """Manifest rewrite should change only the version field."""
    raw_text = '{"name": "typescript", "version": "4.2.0", "keywords": ["TypeScript"]}\n'
    manifest = _manifest(raw_text)

    rendered = rewrite_manifest(manifest, "4.2", "0-dev.20240305", _CONFIG)

    assert rendered == (
        "{\n"
        '    "name": "typescript",\n'
        '    "version": "4.2.0-dev.20240305",\n'
        '    "keywords": [\n'
        '        "TypeScript"\n'
        "    ]\n"
        "}\n"
    )


def test_rewrite_manifest_keeps_missing_trailing_newline_and_unicode() -> None:
    """Output should not gain a newline or escape non-ASCII text."""
    raw_text = '{"version": "1.0.0", "author": "Zoë"}'
    manifest = _manifest(raw_text)

    rendered = rewrite_manifest(manifest, "1.0", "0-insiders.20240305", _CONFIG)

    assert not rendered.endswith("\n") and '"author": "Zoë"' in rendered


def test_rewrite_manifest_output_parses_back_to_same_components() -> None:
    """Parsing the rewritten version should recover major-minor and patch."""
    raw_text = '{"version": "4.2.0"}'
    manifest = _manifest(raw_text)

    rendered = rewrite_manifest(manifest, "4.2", "0-dev.20240305", _CONFIG)
    triple = parse_manifest_version(json.loads(rendered)["version"])

    assert (triple.major_minor, triple.patch) == ("4.2", "0")


def test_rewrite_manifest_does_not_mutate_document() -> None:
    """The parsed manifest should be left untouched."""
    fields = {"name": "typescript", "version": "4.2.0"}
    manifest = ManifestDocument(path=Path("package.json"), fields=fields, raw_text="")

    rewrite_manifest(manifest, "4.2", "0-dev.20240305", _CONFIG)

    assert fields["version"] == "4.2.0"
