"""Author name parsing according to BibTeX rules."""

import re
from dataclasses import dataclass

from .models import Person

_AND_PATTERN = re.compile(r"\s+and\s+", re.IGNORECASE)


@dataclass
class ParsedName:
    """Parsed name components."""

    first: list[str]
    von: list[str]
    last: list[str]
    jr: list[str]

    def is_empty(self) -> bool:
        """Check if name is empty."""
        return not any([self.first, self.von, self.last, self.jr])

    def to_person(self) -> Person:
        """Collapse the components into a family/given name pair.

        The von particle stays with the family name, so "van Beethoven"
        sorts and renders as one name.
        """
        return Person(
            name=_join(self.von + self.last),
            given_name=_join(self.first),
            suffix=_join(self.jr),
        )


def _join(tokens: list[str]) -> str:
    return " ".join(_strip_braces(t) for t in tokens)


def _strip_braces(token: str) -> str:
    return token.replace("{", "").replace("}", "")


class NameParser:
    """Parse author names according to BibTeX rules."""

    @staticmethod
    def parse(name: str) -> ParsedName:
        """
        Parse name according to BibTeX's three formats.

        Format determined by comma count:
        - 0 commas: "First von Last"
        - 1 comma: "von Last, First"
        - 2 commas: "von Last, Jr, First"
        """
        name = name.strip()
        if not name:
            return ParsedName([], [], [], [])

        comma_count = NameParser._count_commas(name)

        if comma_count == 0:
            return NameParser._parse_first_von_last(name)
        elif comma_count == 1:
            return NameParser._parse_von_last_first(name)
        else:
            # Everything after the second comma is the first name
            return NameParser._parse_von_last_jr_first(name)

    @staticmethod
    def parse_list(value: str | None) -> tuple[Person, ...]:
        """Split a BibTeX name list on ``and`` and parse every name.

        Escaped ampersands (``\\&``) are not delimiters.
        """
        if not value:
            return ()

        temp = value.replace(r"\&", "\x00")
        persons = []
        for raw in _AND_PATTERN.split(temp):
            raw = raw.replace("\x00", "&").strip()
            if not raw:
                continue
            parsed = NameParser.parse(raw)
            if not parsed.is_empty():
                persons.append(parsed.to_person())
        return tuple(persons)

    @staticmethod
    def _count_commas(name: str) -> int:
        """Count commas outside braces."""
        count = 0
        level = 0
        for char in name:
            if char == "{":
                level += 1
            elif char == "}":
                level -= 1
            elif char == "," and level == 0:
                count += 1
        return count

    @staticmethod
    def _split_commas(name: str, maxsplit: int) -> list[str]:
        """Split on top-level commas."""
        parts = []
        current = []
        level = 0
        for char in name:
            if char == "{":
                level += 1
            elif char == "}":
                level -= 1
            if char == "," and level == 0 and len(parts) < maxsplit:
                parts.append("".join(current))
                current = []
            else:
                current.append(char)
        parts.append("".join(current))
        return parts

    @staticmethod
    def _tokenize(name: str) -> list[str]:
        """Split name into tokens, preserving braced groups."""
        tokens = []
        current = []
        brace_level = 0

        for char in name:
            if char == "{":
                brace_level += 1
                current.append(char)
            elif char == "}":
                brace_level -= 1
                current.append(char)
            elif char in " \t\n~" and brace_level == 0:
                if current:
                    tokens.append("".join(current))
                    current = []
            else:
                current.append(char)

        if current:
            tokens.append("".join(current))

        return [token for token in tokens if token]

    @staticmethod
    def _starts_with_lowercase(word: str) -> bool:
        """
        Check if word starts with lowercase letter.

        Braced words are never von particles; otherwise the first real
        letter decides.
        """
        if word.startswith("{") and word.endswith("}"):
            return False

        for char in word:
            if char.isalpha():
                return char.islower()

        return False

    @staticmethod
    def _split_von_last(tokens: list[str]) -> tuple[list[str], list[str]]:
        """Split 'von Last' tokens; Last keeps at least one token."""
        von_end = -1
        for i in range(len(tokens) - 1):
            if NameParser._starts_with_lowercase(tokens[i]):
                von_end = i

        if von_end >= 0:
            return tokens[: von_end + 1], tokens[von_end + 1 :]
        return [], tokens

    @staticmethod
    def _parse_first_von_last(name: str) -> ParsedName:
        """Parse 'First von Last' format."""
        tokens = NameParser._tokenize(name)

        if not tokens:
            return ParsedName([], [], [], [])

        if len(tokens) == 1:
            return ParsedName([], [], tokens, [])

        # von is a run of lowercase words that never includes the last word
        von_start = None
        von_end = None

        for i in range(len(tokens) - 1):
            if NameParser._starts_with_lowercase(tokens[i]):
                if von_start is None:
                    von_start = i
                von_end = i
            elif von_start is not None:
                break

        if von_start is not None and von_end is not None:
            first = tokens[:von_start]
            von = tokens[von_start : von_end + 1]
            last = tokens[von_end + 1 :]
        else:
            first = tokens[:-1]
            von = []
            last = tokens[-1:]

        return ParsedName(first, von, last, [])

    @staticmethod
    def _parse_von_last_first(name: str) -> ParsedName:
        """Parse 'von Last, First' format."""
        von_last, first = NameParser._split_commas(name, 1)
        first_tokens = NameParser._tokenize(first.strip())

        tokens = NameParser._tokenize(von_last.strip())
        if not tokens:
            return ParsedName(first_tokens, [], [], [])

        von, last = NameParser._split_von_last(tokens)
        return ParsedName(first_tokens, von, last, [])

    @staticmethod
    def _parse_von_last_jr_first(name: str) -> ParsedName:
        """Parse 'von Last, Jr, First' format."""
        von_last, jr, first = NameParser._split_commas(name, 2)
        first_tokens = NameParser._tokenize(first.strip())
        jr_tokens = NameParser._tokenize(jr.strip())

        tokens = NameParser._tokenize(von_last.strip())
        if not tokens:
            return ParsedName(first_tokens, [], [], jr_tokens)

        von, last = NameParser._split_von_last(tokens)
        return ParsedName(first_tokens, von, last, jr_tokens)
