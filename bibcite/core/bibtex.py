"""BibTeX decoding into Entry objects.

The decoder is regex based: it handles comments, @string definitions,
nested braces (up to four levels) and the three value forms (quoted,
braced and bare). It does not validate entries.
"""

import logging
import re
from typing import Any

from .fields import EntryType
from .models import Entry
from .names import NameParser

logger = logging.getLogger(__name__)

# Blocks that look like entries but are not
NON_ENTRY_TYPES = {"comment", "preamble", "string"}

NAME_FIELDS = {"author", "editor"}

TEXT_FIELDS = {
    "title",
    "journal",
    "volume",
    "number",
    "pages",
    "publisher",
    "address",
    "booktitle",
    "date",
}


class BibtexDecoder:
    """Parse BibTeX format into entry dictionaries and Entry objects."""

    ENTRY_PATTERN = re.compile(
        r"@(\w+)\s*\{([^,{}]+),\s*((?:[^{}]|{(?:[^{}]|{(?:[^{}]|{(?:[^{}]|{[^{}]*})*})*})*})*)\s*\}",
        re.DOTALL | re.MULTILINE,
    )

    STRING_PATTERN = re.compile(
        r'@string\s*\{\s*(\w+)\s*=\s*(?:"([^"]*?)"|{([^{}]*)})\s*\}',
        re.IGNORECASE | re.MULTILINE,
    )

    FIELD_PATTERN = re.compile(
        r'(\w+)\s*=\s*(?:"([^"]*?)"|{((?:[^{}]|{(?:[^{}]|{(?:[^{}]|{[^{}]*})*})*})*)}|([^,}]+?))\s*(?:,|$)',
        re.MULTILINE,
    )

    UNESCAPE_MAP = {
        "\\\\": "\\",
        "\\$": "$",
        "\\&": "&",
        "\\#": "#",
        "\\_": "_",
        "\\%": "%",
        "\\~{}": "~",
        "\\^{}": "^",
    }

    @classmethod
    def unescape(cls, text: str) -> str:
        """Unescape LaTeX special characters.

        Args:
            text: Text with escaped characters.

        Returns:
            Text with special characters unescaped.
        """
        if not text:
            return text

        result = text
        for escaped, char in sorted(
            cls.UNESCAPE_MAP.items(), key=lambda item: len(item[0]), reverse=True
        ):
            result = result.replace(escaped, char)
        return result

    @classmethod
    def decode(cls, bibtex_str: str) -> list[dict[str, Any]]:
        """Decode BibTeX string to list of entry dictionaries.

        Field names are lowercased, bare values that name an @string
        definition are substituted and ``year`` is converted to ``int``
        where possible. Values keep their braces; the ``\\&`` escape is
        left in place for name lists, which split on ``and``.

        Args:
            bibtex_str: BibTeX format string.

        Returns:
            List of dictionaries with ``type``, ``key`` and field values.
        """
        entries = []

        bibtex_str = bibtex_str.replace(r"\%", "\x00PERCENT\x00")
        bibtex_str = re.sub(r"%.*$", "", bibtex_str, flags=re.MULTILINE)
        bibtex_str = bibtex_str.replace("\x00PERCENT\x00", r"\%")

        strings = {
            m.group(1).lower(): m.group(2) if m.group(2) is not None else m.group(3)
            for m in cls.STRING_PATTERN.finditer(bibtex_str)
        }
        bibtex_str = cls.STRING_PATTERN.sub("", bibtex_str)

        for match in cls.ENTRY_PATTERN.finditer(bibtex_str):
            entry_type = match.group(1).lower()
            if entry_type in NON_ENTRY_TYPES:
                continue

            entry_key = match.group(2).strip()
            fields_str = match.group(3)

            fields: dict[str, Any] = {"type": entry_type, "key": entry_key}

            for field_match in cls.FIELD_PATTERN.finditer(fields_str):
                field_name = field_match.group(1).lower()
                bare = field_match.group(4)
                if bare is not None:
                    value = bare.strip()
                    value = strings.get(value.lower(), value)
                else:
                    value = (field_match.group(2) or field_match.group(3) or "").strip()

                if field_name not in NAME_FIELDS:
                    value = cls.unescape(value)

                if field_name == "year":
                    try:
                        value = int(value)
                    except ValueError:
                        pass

                fields[field_name] = value

            entries.append(fields)

        return entries

    @classmethod
    def decode_entries(cls, bibtex_str: str) -> list[Entry]:
        """Decode BibTeX string straight into Entry objects."""
        return [cls.to_entry(fields) for fields in cls.decode(bibtex_str)]

    @staticmethod
    def to_entry(fields: dict[str, Any]) -> Entry:
        """Build an Entry from a decoded field dictionary.

        Unknown entry types are kept as ``misc``. A non-numeric year is
        moved to ``date`` so it renders as an unknown date.
        """
        data = dict(fields)
        key = data.pop("key")
        type_tag = data.pop("type")

        entry_type = EntryType.parse(type_tag)
        if entry_type is None:
            logger.warning(f"Unknown entry type '{type_tag}' for {key}, using misc")
            entry_type = EntryType.MISC

        kwargs: dict[str, Any] = {}
        custom: dict[str, Any] = {}

        for name, value in data.items():
            if name in NAME_FIELDS:
                kwargs[name] = NameParser.parse_list(value) or None
            elif name == "year":
                if isinstance(value, int):
                    kwargs["year"] = value
                elif value:
                    kwargs.setdefault("date", _clean(value))
            elif name in TEXT_FIELDS:
                kwargs[name] = _clean(value)
            else:
                custom[name] = value

        return Entry(key=key, type=entry_type, custom=custom or None, **kwargs)


def _clean(value: str) -> str:
    """Drop case-protecting braces and collapse whitespace."""
    value = value.replace("{", "").replace("}", "")
    return re.sub(r"\s+", " ", value).strip()
