"""Rendering settings."""

import enum
from collections.abc import Mapping
from typing import Any

import msgspec

from .exceptions import ConfigError

DEFAULT_PLACEHOLDER = "[[_REFS_]]"


class CitationStyle(enum.Enum):
    """Inline citation and reference-list style."""

    INDEX = "numbered"
    AUTHOR_YEAR = "author-year"


class Config(msgspec.Struct, frozen=True, kw_only=True, rename="kebab"):
    """Immutable rendering configuration.

    Field names are kebab-case in configuration files
    (``refs-file``, ``render-key``, ``link-refs``).
    """

    bibliography: str = "bibliography.bib"
    style: CitationStyle = CitationStyle.AUTHOR_YEAR
    refs_file: str | None = None
    placeholder: str = DEFAULT_PLACEHOLDER
    render_key: bool = True
    link_refs: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "Config":
        """Convert a plain mapping, ignoring unknown keys.

        Raises:
            ConfigError: If the style is unknown, the placeholder is empty or
                a value has the wrong type.
        """
        data = dict(data or {})

        style = data.get("style")
        if isinstance(style, str) and style not in {s.value for s in CitationStyle}:
            raise ConfigError(
                f"Unknown citation style '{style}'. Use 'numbered' or 'author-year'",
                field="style",
            )

        if data.get("placeholder") == "":
            raise ConfigError("Placeholder must not be empty", field="placeholder")

        try:
            return msgspec.convert(data, cls)
        except msgspec.ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
