"""Core data models for bibliography entries.

This module defines the structures the citation pipeline reads from:

- Person: one author or editor, split into family and given name
- Entry: immutable bibliography entry with the fields used for rendering
- Bibliography: keyed, read-only collection of entries
"""

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import msgspec

from .fields import EntryType

logger = logging.getLogger(__name__)

_EXACT_DATE = re.compile(r"(\d{1,4})(?:-\d{2}(?:-\d{2})?)?")
_PAGE_RANGE = re.compile(r"(\d+)\s*(?:-+|–|—)\s*(\d+)")
_PAGE_SINGLE = re.compile(r"\d+")
_AND_PATTERN = re.compile(r"\s+and\s+", re.IGNORECASE)


class Person(msgspec.Struct, frozen=True, order=True):
    """A single author or editor.

    Ordering compares family name, then given name, then suffix, which
    is the order used to sort author-year reference lists.
    """

    name: str
    given_name: str = ""
    suffix: str = ""

    @property
    def initials(self) -> str:
        """First letter of every space-separated given name token."""
        return "".join(part[0] for part in self.given_name.split(" ") if part)


class Entry(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable bibliography entry.

    Only the fields the reference formatters read are modelled
    explicitly; everything else a source file carries ends up in
    ``custom``.
    """

    key: str
    type: EntryType = EntryType.MISC
    author: tuple[Person, ...] | None = None
    editor: tuple[Person, ...] | None = None
    title: str | None = None
    journal: str | None = None
    volume: str | None = None
    number: str | None = None
    pages: str | None = None
    publisher: str | None = None
    address: str | None = None
    booktitle: str | None = None
    year: int | None = None
    date: str | None = None
    custom: dict[str, Any] | None = None

    @property
    def exact_year(self) -> int | None:
        """Year of an exactly known date, ``None`` for ranges or unknowns."""
        if self.year is not None:
            return self.year
        if self.date:
            match = _EXACT_DATE.fullmatch(self.date.strip())
            if match:
                return int(match.group(1))
        return None

    @property
    def page_ranges(self) -> list[tuple[int, int]]:
        """Parse the pages field into ``(start, end)`` pairs.

        Parts that are not numeric (e.g. article numbers like ``e1234``)
        are dropped, so a present but unparsable field yields ``[]``.
        """
        if not self.pages:
            return []

        ranges = []
        for part in self.pages.split(","):
            part = part.strip()
            match = _PAGE_RANGE.fullmatch(part)
            if match:
                ranges.append((int(match.group(1)), int(match.group(2))))
            elif _PAGE_SINGLE.fullmatch(part):
                ranges.append((int(part), int(part)))
        return ranges

    @property
    def publishers(self) -> tuple[str, ...]:
        """Publisher field split on ``and``."""
        if not self.publisher:
            return ()
        return tuple(p.strip() for p in _AND_PATTERN.split(self.publisher) if p.strip())


class Bibliography:
    """Read-only collection of entries keyed by citation key.

    When a key is defined twice the first definition wins.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: dict[str, Entry] = {}
        for entry in entries:
            if entry.key in self._entries:
                logger.warning(f"Duplicate bibliography key ignored: {entry.key}")
                continue
            self._entries[entry.key] = entry

    def get(self, key: str) -> Entry | None:
        """Get entry by citation key."""
        return self._entries.get(key)

    def keys(self) -> list[str]:
        """All keys in source order."""
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def parse(cls, text: str) -> "Bibliography":
        """Build a bibliography from BibTeX source."""
        from .bibtex import BibtexDecoder

        return cls(BibtexDecoder.decode_entries(text))

    @classmethod
    def load(cls, path: Path | str) -> "Bibliography":
        """Read and parse a BibTeX file.

        Raises:
            BibliographyError: If the file can't be read or holds no entries.
        """
        from .exceptions import BibliographyError

        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise BibliographyError(
                str(path), f"Can't read bibliography from file {path} - {e}"
            ) from e

        bibliography = cls.parse(content)
        if not bibliography:
            raise BibliographyError(str(path), f"No valid bibliography in file {path}")

        logger.debug(f"Loaded {len(bibliography)} entries from {path}")
        return bibliography
