"""Citation discovery, inline formatting and reference lists.

Markers of the form ``@key`` (or ``-@key`` to suppress the author) are
found by the scanner, registered in first-seen order and replaced by
numbered or author-year citations that link to an anchored reference
list.
"""

from bibcite.citations.entries import (
    FORMATTERS,
    format_article,
    format_authors,
    format_book,
    format_entry,
    format_incollection,
    format_pages,
)
from bibcite.citations.links import INVALID_PATH, link_prefix
from bibcite.citations.references import (
    cited_entries,
    format_reference,
    insert_references,
    render_references,
)
from bibcite.citations.registry import CitationRegistry
from bibcite.citations.scanner import (
    MARKER_PATTERN,
    CitationMarker,
    find_markers,
    scan_block,
    scan_document,
    scan_line,
)
from bibcite.citations.styles import (
    format_anchor,
    format_authors_citation,
    format_citation,
    format_year,
    key_to_anchor,
)

__all__ = [
    # Registry
    "CitationRegistry",
    # Scanner
    "MARKER_PATTERN",
    "CitationMarker",
    "find_markers",
    "scan_line",
    "scan_block",
    "scan_document",
    # Inline citations
    "format_citation",
    "format_authors_citation",
    "format_year",
    "format_anchor",
    "key_to_anchor",
    # Entries
    "FORMATTERS",
    "format_entry",
    "format_article",
    "format_book",
    "format_incollection",
    "format_authors",
    "format_pages",
    # Reference lists
    "cited_entries",
    "format_reference",
    "render_references",
    "insert_references",
    # Links
    "link_prefix",
    "INVALID_PATH",
]
