"""Version synchronization layer.

This module validates that a manifest and a source file agree on a
version and rewrites both with a date-stamped prerelease identifier.
"""
