"""Exception classes for bibcite."""


class BibciteError(Exception):
    """Base exception for all fatal bibcite errors."""

    pass


class BibliographyError(BibciteError):
    """Raised when a bibliography cannot be read or holds no entries."""

    def __init__(self, path: str, message: str):
        """Initialize with the bibliography path."""
        self.path = path
        super().__init__(message)


class ConfigError(BibciteError, ValueError):
    """Raised when configuration is malformed."""

    def __init__(self, message: str, field: str | None = None):
        """Initialize with the offending field, if known."""
        self.field = field
        super().__init__(message)


class ProtocolError(BibciteError):
    """Raised when pre-processor input cannot be decoded."""

    pass
