"""BibTeX entry types and their formatting categories."""

from enum import Enum, unique


@unique
class EntryCategory(Enum):
    """Reference-list formatting categories.

    Several BibTeX types share one layout; everything without a
    dedicated layout is formatted like an article.
    """

    ARTICLE = "article"
    BOOK = "book"
    INBOOK = "inbook"
    INCOLLECTION = "incollection"
    OTHER = "other"


@unique
class EntryType(Enum):
    """BibTeX entry types."""

    ARTICLE = "article"
    BOOK = "book"
    BOOKLET = "booklet"
    INBOOK = "inbook"
    INCOLLECTION = "incollection"
    INPROCEEDINGS = "inproceedings"
    CONFERENCE = "conference"  # Alias for inproceedings
    MANUAL = "manual"
    MASTERSTHESIS = "mastersthesis"
    MISC = "misc"
    PHDTHESIS = "phdthesis"
    PROCEEDINGS = "proceedings"
    TECHREPORT = "techreport"
    UNPUBLISHED = "unpublished"

    # Modern types
    ONLINE = "online"
    ELECTRONIC = "electronic"
    PATENT = "patent"
    SOFTWARE = "software"
    DATASET = "dataset"
    THESIS = "thesis"

    @property
    def category(self) -> EntryCategory:
        """Formatting category of this type."""
        return _CATEGORIES.get(self, EntryCategory.OTHER)

    @classmethod
    def parse(cls, value: str) -> "EntryType | None":
        """Look up a type tag case-insensitively, ``None`` if unknown."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_CATEGORIES = {
    EntryType.ARTICLE: EntryCategory.ARTICLE,
    EntryType.BOOK: EntryCategory.BOOK,
    EntryType.INBOOK: EntryCategory.INBOOK,
    EntryType.INCOLLECTION: EntryCategory.INCOLLECTION,
    EntryType.INPROCEEDINGS: EntryCategory.INCOLLECTION,
    EntryType.CONFERENCE: EntryCategory.INCOLLECTION,
}
