"""Runtime configuration for the h3 filters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from h3_filters.core.constants import (
    DEFAULT_KML_DESCRIPTION,
    DEFAULT_KML_NAME,
    MAX_TEXT_LENGTH,
)


class OutputMode(Enum):
    """Output format, fixed for the lifetime of one run."""

    PLAIN_TEXT = "plain"
    KML = "kml"


def truncate_text(value: str | None, limit: int = MAX_TEXT_LENGTH) -> str | None:
    """
    Cap a text value at ``limit`` characters.

    Args:
        value: Text to cap, or None
        limit: Maximum number of characters to keep

    Returns:
        The value cut to at most ``limit`` characters, or None if value was None
    """
    if value is None:
        return None
    return value[:limit]


@dataclass(frozen=True, slots=True)
class KmlDocumentMetadata:
    """Name and description written once in the KML document header."""

    name: str = DEFAULT_KML_NAME
    description: str = DEFAULT_KML_DESCRIPTION

    @classmethod
    def from_overrides(
        cls, name: str | None = None, description: str | None = None
    ) -> KmlDocumentMetadata:
        """
        Build metadata from optional user overrides.

        Missing overrides fall back to the defaults; supplied ones are
        truncated to MAX_TEXT_LENGTH characters.
        """
        return cls(
            name=DEFAULT_KML_NAME if name is None else truncate_text(name),
            description=(
                DEFAULT_KML_DESCRIPTION if description is None else truncate_text(description)
            ),
        )


@dataclass(frozen=True, slots=True)
class FilterOptions:
    """
    Options for one h3ToGeo run.

    Attributes:
        index: Cell index given with --index, or None to read from stdin
        output_mode: Plain text or KML output
        kml: Header metadata, only used in KML mode
        verbose: Emit debug diagnostics on stderr
    """

    index: int | None = None
    output_mode: OutputMode = OutputMode.PLAIN_TEXT
    kml: KmlDocumentMetadata = field(default_factory=KmlDocumentMetadata)
    verbose: bool = False

    @property
    def single_value(self) -> bool:
        return self.index is not None

    @classmethod
    def from_params(
        cls,
        index: int | None = None,
        kml: bool = False,
        kml_name: str | None = None,
        kml_description: str | None = None,
        verbose: bool = False,
    ) -> FilterOptions:
        """Build options from the parameters parsed by the CLI."""
        return cls(
            index=index,
            output_mode=OutputMode.KML if kml else OutputMode.PLAIN_TEXT,
            kml=KmlDocumentMetadata.from_overrides(kml_name, kml_description),
            verbose=verbose,
        )
