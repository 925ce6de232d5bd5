"""Core domain models, configuration and bibliography loading."""

from bibcite.core.bibtex import BibtexDecoder
from bibcite.core.config import DEFAULT_PLACEHOLDER, CitationStyle, Config
from bibcite.core.exceptions import (
    BibciteError,
    BibliographyError,
    ConfigError,
    ProtocolError,
)
from bibcite.core.fields import EntryCategory, EntryType
from bibcite.core.models import Bibliography, Entry, Person
from bibcite.core.names import NameParser, ParsedName

__all__ = [
    # Fields and types
    "EntryType",
    "EntryCategory",
    # Models
    "Entry",
    "Person",
    "Bibliography",
    # Parsing
    "BibtexDecoder",
    "NameParser",
    "ParsedName",
    # Configuration
    "Config",
    "CitationStyle",
    "DEFAULT_PLACEHOLDER",
    # Errors
    "BibciteError",
    "BibliographyError",
    "ConfigError",
    "ProtocolError",
]
