"""Pytest configuration for repository test runs."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

import pytest

from tests.fixture_paths import fixture_path


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def artifact_paths(tmp_path: Path) -> tuple[Path, Path]:
    """Copy the sample manifest and source file into a scratch directory."""
    manifest_path = tmp_path / "package.json"
    source_path = tmp_path / "corePublic.ts"
    shutil.copyfile(fixture_path("prerelease/package.json"), manifest_path)
    shutil.copyfile(fixture_path("prerelease/corePublic.ts"), source_path)
    return manifest_path, source_path
