"""Reference-list rendering and placeholder splicing."""

import logging
from pathlib import PurePath

from bibcite.core.config import CitationStyle, Config
from bibcite.core.models import Bibliography, Entry
from bibcite.documents.models import Document

from .entries import format_entry
from .registry import CitationRegistry
from .styles import format_anchor, format_year

logger = logging.getLogger(__name__)


def format_reference(entry: Entry, index: int, config: Config) -> str:
    """Format one reference-list line.

    The entry body is prefixed with the anchor tag (when linking), the
    1-based number (numbered style) and the raw key (``render_key``).
    """
    result = ""
    if config.link_refs:
        result += format_anchor(entry.key)
    if config.style is CitationStyle.INDEX:
        result += f"[{index + 1}] "
    if config.render_key:
        result += f"[{entry.key}] "
    return result + format_entry(entry)


def _author_year_sort_key(item: tuple[Entry, int]) -> tuple:
    entry, _ = item
    return (tuple(entry.author or ()), format_year(entry))


def cited_entries(
    registry: CitationRegistry, bibliography: Bibliography, config: Config
) -> list[tuple[Entry, int]]:
    """Cited entries with their registry index, in reference-list order.

    Numbered lists keep citation order. Author-year lists are sorted by
    author list and year; the sort is stable, so ties keep citation
    order. Keys missing from the bibliography are skipped.
    """
    items = []
    for key, index in registry.snapshot():
        entry = bibliography.get(key)
        if entry is not None:
            items.append((entry, index))

    if config.style is CitationStyle.AUTHOR_YEAR:
        items.sort(key=_author_year_sort_key)

    return items


def render_references(
    registry: CitationRegistry, bibliography: Bibliography, config: Config
) -> list[str]:
    """Render the reference list as lines, blank-line separated."""
    lines: list[str] = []
    for entry, index in cited_entries(registry, bibliography, config):
        if lines:
            lines.append("")
        lines.append(format_reference(entry, index, config))
    return lines


def insert_references(
    path: PurePath | str,
    document: Document,
    registry: CitationRegistry,
    bibliography: Bibliography,
    config: Config,
) -> bool:
    """Replace the first placeholder line of a document with the references.

    Returns:
        True if a placeholder was found and replaced.
    """
    for block in document.text_blocks():
        for i, line in enumerate(block.text):
            if config.placeholder in line:
                block.text[i : i + 1] = render_references(registry, bibliography, config)
                logger.debug(f"Inserted {len(registry)} references into {path}")
                return True

    if len(registry):
        logger.warning(f"No placeholder {config.placeholder} found in {path}")
    return False
