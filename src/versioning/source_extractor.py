"""Version declaration parsing for source files.

This module locates the major-minor constant and the version template
declared in a source file and checks them against manifest values.
Each lookup returns a tagged result so an absent declaration is kept
distinct from one whose value has an unrecognized shape.
"""

from __future__ import annotations

import re
from typing import Callable

from core.config import PrereleaseConfig
from core.errors import PatternNotFoundError, VersionSkewError
from core.types import DeclarationLookup, SourceDocument, VersionTriple

ValueMatch = tuple[str, str | None, int]
ValueParser = Callable[[str], "ValueMatch | None"]

_MAJOR_MINOR_VALUE_PATTERN = re.compile(r'"(\d+\.\d+)"')


def find_major_minor_declaration(text: str, config: PrereleaseConfig) -> DeclarationLookup:
    """Look up ``export const <major_minor_name> = "M.N"``.

    Args:
        text: Source file text.
        config: Runtime configuration with declaration names.

    Returns:
        Tagged lookup result with the ``M.N`` value when found.
    """
    return _find_declaration(
        text,
        declaration=config.major_minor_name,
        prefix=_declaration_prefix(config.major_minor_name),
        parse_value=_parse_major_minor_value,
    )


def find_version_template_declaration(
    text: str,
    config: PrereleaseConfig,
) -> DeclarationLookup:
    """Look up the version template built from the major-minor constant.

    The template value is ``${<major_minor_name>}.<patch>`` optionally
    followed by the dev marker or an already stamped prerelease tail.

    Args:
        text: Source file text.
        config: Runtime configuration with declaration names.

    Returns:
        Tagged lookup result with the patch as value and any suffix.
    """
    template_pattern = _version_template_pattern(config.major_minor_name)

    def parse_value(raw_value: str) -> ValueMatch | None:
        match = template_pattern.match(raw_value)
        if match is None:
            return None
        return match.group("patch"), match.group("suffix"), match.end()

    return _find_declaration(
        text,
        declaration=config.version_name,
        prefix=_declaration_prefix(config.version_name),
        parse_value=parse_value,
    )


def verify_source_versions(
    source: SourceDocument,
    expected: VersionTriple,
    config: PrereleaseConfig,
) -> DeclarationLookup:
    """Check the source file declarations against manifest components.

    Args:
        source: Source document to inspect.
        expected: Components parsed from the manifest.
        config: Runtime configuration with declaration names.

    Returns:
        Found lookup of the version template declaration.

    Raises:
        PatternNotFoundError: If a declaration is absent or unrecognized.
        VersionSkewError: If a declared value differs from the manifest.
    """
    major_minor = _require_found(find_major_minor_declaration(source.text, config), source)
    if major_minor.value != expected.major_minor:
        raise VersionSkewError(
            component=config.major_minor_name,
            source_path=str(source.path),
            source_value=str(major_minor.value),
            manifest_value=expected.major_minor,
        )
    template = _require_found(find_version_template_declaration(source.text, config), source)
    if template.value != expected.patch:
        raise VersionSkewError(
            component="patch",
            source_path=str(source.path),
            source_value=str(template.value),
            manifest_value=expected.patch,
        )
    return template


def _find_declaration(
    text: str,
    declaration: str,
    prefix: str,
    parse_value: ValueParser,
) -> DeclarationLookup:
    candidates: list[tuple[int, int, str]] = []
    offset = 0
    for line_number, line in enumerate(text.splitlines(keepends=True), start=1):
        column = line.find(prefix)
        if column >= 0:
            raw_value = line[column + len(prefix) :].rstrip("\r\n")
            candidates.append((line_number, offset + column, raw_value))
        offset += len(line)
    if not candidates:
        return DeclarationLookup(declaration=declaration, status="not_found")
    if len(candidates) > 1:
        line_numbers = ", ".join(str(row[0]) for row in candidates)
        return DeclarationLookup(
            declaration=declaration,
            status="malformed",
            line_number=candidates[0][0],
            detail=f"declared more than once (lines {line_numbers})",
        )
    line_number, start, raw_value = candidates[0]
    parsed = parse_value(raw_value)
    if parsed is None:
        return DeclarationLookup(
            declaration=declaration,
            status="malformed",
            line_number=line_number,
            detail=f"unrecognized value {raw_value.strip()!r}",
        )
    value, suffix, consumed = parsed
    return DeclarationLookup(
        declaration=declaration,
        status="found",
        value=value,
        suffix=suffix,
        line_number=line_number,
        span=(start, start + len(prefix) + consumed),
    )


def _require_found(lookup: DeclarationLookup, source: SourceDocument) -> DeclarationLookup:
    if lookup.status == "not_found":
        raise PatternNotFoundError(
            f"{source.path} no longer declares '{lookup.declaration}' "
            f"(expected a line containing '{_declaration_prefix(lookup.declaration)}'). "
            "The file shape changed; update the declaration names before rerunning."
        )
    if lookup.status == "malformed":
        raise PatternNotFoundError(
            f"{source.path}:{lookup.line_number} declares '{lookup.declaration}' "
            f"in an unexpected shape: {lookup.detail}."
        )
    return lookup


def _parse_major_minor_value(raw_value: str) -> ValueMatch | None:
    match = _MAJOR_MINOR_VALUE_PATTERN.match(raw_value)
    if match is None:
        return None
    return match.group(1), None, match.end()


def _declaration_prefix(name: str) -> str:
    return f"export const {name} = "


def _version_template_pattern(major_minor_name: str) -> re.Pattern[str]:
    return re.compile(
        r"`\$\{" + re.escape(major_minor_name) + r"\}\."
        r"(?P<patch>\d+)(?P<suffix>-[a-z]+\.\d{8}|-dev)?`;"
    )
