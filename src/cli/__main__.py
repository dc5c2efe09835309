"""Run prerelease-sync as ``python -m cli <channel> <manifest> <source>``."""

from __future__ import annotations

from cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
