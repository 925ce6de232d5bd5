"""Detection and in-place rewriting of ``@key`` citation markers."""

import logging
import re
from dataclasses import dataclass

from bibcite.core.config import Config
from bibcite.core.models import Bibliography
from bibcite.documents.models import Document, TextBlock

from .registry import CitationRegistry
from .styles import format_citation

logger = logging.getLogger(__name__)

# Optional "-" suppresses the author; the key stops at whitespace,
# brackets, quotes, parentheses and BibTeX/Markdown punctuation.
MARKER_PATTERN = re.compile(r"""(?P<no_author>-)?@(?P<key>[^\[\]\s."#'(),={}%;]+)""")


@dataclass
class CitationMarker:
    """A marker found in a line of text."""

    key: str
    no_author: bool
    start: int
    end: int


def find_markers(line: str) -> list[CitationMarker]:
    """Find all markers in a line, left to right, non-overlapping."""
    return [
        CitationMarker(
            key=match.group("key"),
            no_author=match.group("no_author") is not None,
            start=match.start(),
            end=match.end(),
        )
        for match in MARKER_PATTERN.finditer(line)
    ]


def scan_line(
    line: str,
    registry: CitationRegistry,
    bibliography: Bibliography,
    config: Config,
    link_prefix: str = "",
    missing: list[str] | None = None,
) -> str:
    """Return ``line`` with every known marker replaced by its citation.

    Markers whose key is not in the bibliography are kept verbatim and
    appended to ``missing``.
    """
    if "@" not in line:
        return line

    parts = []
    pos = 0
    for marker in find_markers(line):
        entry = bibliography.get(marker.key)
        if entry is None:
            logger.warning(f"Citation entry not found: {marker.key}")
            if missing is not None:
                missing.append(marker.key)
            continue

        index = registry.register(marker.key)
        parts.append(line[pos : marker.start])
        parts.append(
            format_citation(
                entry,
                index,
                config.style,
                link_prefix=link_prefix,
                no_author=marker.no_author,
                link_refs=config.link_refs,
            )
        )
        pos = marker.end

    if not parts:
        return line

    parts.append(line[pos:])
    return "".join(parts)


def scan_block(
    block: TextBlock,
    registry: CitationRegistry,
    bibliography: Bibliography,
    config: Config,
    link_prefix: str = "",
) -> list[str]:
    """Rewrite all markers of a text block in place.

    Returns:
        Keys of markers that were not found, in order of appearance.
    """
    missing: list[str] = []
    for i, line in enumerate(block.text):
        block.text[i] = scan_line(
            line, registry, bibliography, config, link_prefix, missing
        )
    return missing


def scan_document(
    document: Document,
    registry: CitationRegistry,
    bibliography: Bibliography,
    config: Config,
    link_prefix: str = "",
) -> list[str]:
    """Rewrite all markers of every text block of a document."""
    missing: list[str] = []
    for block in document.text_blocks():
        missing.extend(scan_block(block, registry, bibliography, config, link_prefix))
    return missing
