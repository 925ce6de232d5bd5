"""Inline citation formatting for the numbered and author-year styles."""

from collections.abc import Sequence

from bibcite.core.config import CitationStyle
from bibcite.core.models import Entry, Person

UNKNOWN_YEAR = "????"
ANONYMOUS = "Anonymous"


def key_to_anchor(key: str) -> str:
    """Anchor id of a reference-list entry."""
    return f"cite-ref-{key}"


def format_anchor(key: str) -> str:
    """HTML anchor placed in front of a reference-list entry."""
    anchor = key_to_anchor(key)
    return f'<a name="{anchor}" id="{anchor}"></a>'


def format_year(entry: Entry) -> str:
    """Year digits of an exact date, ``????`` otherwise."""
    year = entry.exact_year
    return str(year) if year is not None else UNKNOWN_YEAR


def format_authors_citation(authors: Sequence[Person] | None) -> str:
    """Short author form used in inline citations.

    One author gives the family name, two are joined with ``&`` and
    three or more collapse to the first author followed by ``et al.``.
    """
    if not authors:
        return ANONYMOUS
    if len(authors) == 1:
        return authors[0].name
    if len(authors) == 2:
        return f"{authors[0].name} & {authors[1].name}"
    return f"{authors[0].name} et al."


def format_citation(
    entry: Entry,
    index: int,
    style: CitationStyle,
    link_prefix: str = "",
    no_author: bool = False,
    link_refs: bool = True,
) -> str:
    """Format the inline replacement for a citation marker.

    Args:
        entry: Cited entry.
        index: 0-based registry index of the entry.
        style: Citation style.
        link_prefix: Path of the document holding the reference list,
            empty when it is the citing document itself.
        no_author: Suppress the author in author-year citations.
        link_refs: Emit a Markdown link to the reference-list anchor.

    Returns:
        ``[Klabnik & Nichols 2018](#cite-ref-Klabnik2018)`` style text,
        or the bare label when ``link_refs`` is off.
    """
    if style is CitationStyle.INDEX:
        label = str(index + 1)
    elif no_author:
        label = format_year(entry)
    else:
        label = f"{format_authors_citation(entry.author)} {format_year(entry)}"

    if not link_refs:
        return label

    return f"[{label}]({link_prefix}#{key_to_anchor(entry.key)})"
