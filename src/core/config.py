"""Runtime configuration model for prerelease-sync.

This module owns validation of declaration names and output format.
Other modules consume a typed config object instead of raw literals.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import DEFAULT_MAJOR_MINOR_NAME, DEFAULT_VERSION_NAME, MANIFEST_INDENT
from core.errors import PrereleaseConfigError


@dataclass(frozen=True)
class PrereleaseConfig:
    """Validated runtime configuration.

    Attributes:
        major_minor_name: Source constant holding the ``M.N`` string.
        version_name: Source constant holding the version template.
        manifest_indent: Spaces per indentation level in the manifest.
    """

    major_minor_name: str
    version_name: str
    manifest_indent: int

    @classmethod
    def from_defaults(
        cls,
        major_minor_name: str = DEFAULT_MAJOR_MINOR_NAME,
        version_name: str = DEFAULT_VERSION_NAME,
        manifest_indent: int = MANIFEST_INDENT,
    ) -> "PrereleaseConfig":
        """Build config from defaults with optional overrides.

        Returns:
            A validated config object.

        Raises:
            PrereleaseConfigError: If an override is invalid.
        """
        _validate_declaration_name("major_minor_name", major_minor_name)
        _validate_declaration_name("version_name", version_name)
        if major_minor_name == version_name:
            raise PrereleaseConfigError(
                "major_minor_name and version_name must differ, "
                f"both were '{version_name}'."
            )
        if manifest_indent < 0:
            raise PrereleaseConfigError(
                f"Invalid manifest_indent value: expected >= 0, got {manifest_indent}."
            )
        return cls(
            major_minor_name=major_minor_name,
            version_name=version_name,
            manifest_indent=manifest_indent,
        )


def _validate_declaration_name(field_name: str, value: str) -> None:
    """Validate one source constant name.

    Args:
        field_name: Config attribute being validated.
        value: Candidate identifier.

    Raises:
        PrereleaseConfigError: If value is not a plain identifier.
    """
    if not value.isidentifier():
        raise PrereleaseConfigError(
            f"Invalid {field_name} value: expected an identifier, got '{value}'. "
            "Use the exact constant name declared in the source file."
        )
