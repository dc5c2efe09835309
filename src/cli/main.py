"""Prerelease-sync CLI entry points.

This module maps the three positional arguments onto the SDK workflow.
Too few arguments print usage and exit successfully.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from core.constants import CLI_PROG_NAME, SUPPORTED_CHANNELS, USAGE_TEXT
from core.errors import PrereleaseError
from core.types import PrereleaseRequest
from versioning.orchestrator import configure_prerelease

_POSITIONAL_ARGUMENT_COUNT = 3


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog=CLI_PROG_NAME,
        description="Stamp a manifest and a source file with a dated prerelease version",
    )
    parser.add_argument("channel", help=f"Release channel: {' or '.join(SUPPORTED_CHANNELS)}")
    parser.add_argument("manifest", help="package.json location")
    parser.add_argument("source", help="Source file containing the version constants")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prerelease-sync CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)
    if len(arguments) < _POSITIONAL_ARGUMENT_COUNT:
        print(USAGE_TEXT)
        return 0
    args = build_parser().parse_args(["--", *arguments])
    request = PrereleaseRequest(
        channel=args.channel,
        manifest_path=_normalize_path(args.manifest),
        source_path=_normalize_path(args.source),
    )
    try:
        result = configure_prerelease(request)
    except PrereleaseError as error:
        print(f"prerelease_error={error}")
        return 1
    print(f"version={result.version}")
    print(f"manifest_path={result.manifest_path}")
    print(f"source_path={result.source_path}")
    return 0


def _normalize_path(raw_path: str) -> Path:
    return Path(raw_path).expanduser().resolve()
