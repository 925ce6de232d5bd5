"""Reference-list formatting per entry category.

Every formatter renders the common head
``<Authors> (<Year>): **<Title>**`` followed by a category specific
tail. Dispatch goes through ``FORMATTERS``, keyed by
``EntryCategory``; categories without a dedicated formatter fall back
to the article layout.
"""

from collections.abc import Callable, Sequence
from types import MappingProxyType

from bibcite.core.fields import EntryCategory
from bibcite.core.models import Entry, Person

from .styles import ANONYMOUS, format_year

UNTITLED = "Untitled"
MISSING_PAGES = "???"

EntryFormatter = Callable[[Entry], str]


def format_authors(authors: Sequence[Person] | None) -> str:
    """Full author list: family name plus initials, comma separated.

    >>> format_authors([Person("Knuth", "Donald Ervin")])
    'Knuth DE'
    """
    if not authors:
        return ANONYMOUS

    names = []
    for person in authors:
        initials = person.initials
        names.append(f"{person.name} {initials}" if initials else person.name)
    return ", ".join(names)


def format_pages(ranges: Sequence[tuple[int, int]]) -> str:
    """Render the first page range as ``start-end``; ``???`` when there is none.

    A single page still renders as a range (``5-5``).
    """
    if not ranges:
        return MISSING_PAGES
    start, end = ranges[0]
    return f"{start}-{end}"


def _format_head(entry: Entry) -> str:
    return (
        f"{format_authors(entry.author)} ({format_year(entry)}): "
        f"**{entry.title or UNTITLED}**"
    )


def _format_publication(entry: Entry) -> str:
    """Publisher and address tail shared by books and collections."""
    result = ""
    if entry.publishers:
        result += f". *{', '.join(entry.publishers)}*"
    if entry.address:
        result += f", {entry.address}"
    return result


def format_article(entry: Entry) -> str:
    """Journal articles, and the fallback for every other category."""
    result = _format_head(entry)

    if entry.journal:
        result += f". *{entry.journal}*"

    if entry.volume:
        result += f" {entry.volume}"
        if entry.number:
            result += f":{entry.number}"

    if entry.pages is not None:
        result += f", {format_pages(entry.page_ranges)}"

    return result + "."


def format_book(entry: Entry) -> str:
    """Books and parts of books."""
    return _format_head(entry) + _format_publication(entry) + "."


def format_incollection(entry: Entry) -> str:
    """Contributions to edited collections and proceedings."""
    result = _format_head(entry)
    result += (
        f". In: {format_authors(entry.editor)} (eds.): "
        f"{entry.booktitle or UNTITLED}"
    )

    if entry.pages is not None:
        result += f", pp. {format_pages(entry.page_ranges)}"

    return result + _format_publication(entry) + "."


FORMATTERS: "MappingProxyType[EntryCategory, EntryFormatter]" = MappingProxyType(
    {
        EntryCategory.ARTICLE: format_article,
        EntryCategory.BOOK: format_book,
        EntryCategory.INBOOK: format_book,
        EntryCategory.INCOLLECTION: format_incollection,
    }
)


def format_entry(entry: Entry) -> str:
    """Format the body of a reference-list line for any entry."""
    formatter = FORMATTERS.get(entry.type.category, format_article)
    return formatter(entry)
