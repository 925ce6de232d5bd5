"""Tests for BibTeX decoding."""

import logging

from bibcite.core.bibtex import BibtexDecoder
from bibcite.core.fields import EntryType
from bibcite.core.models import Person


class TestDecode:
    """Test decoding into field dictionaries."""

    def test_value_forms(self) -> None:
        """Braced, quoted and bare values are all read."""
        entries = BibtexDecoder.decode(
            """
            @article{key1,
                title = {Braced {Title}},
                journal = "Quoted Journal",
                volume = 7,
                year = {2021}
            }
            """
        )

        assert len(entries) == 1
        fields = entries[0]
        assert fields["type"] == "article"
        assert fields["key"] == "key1"
        assert fields["title"] == "Braced {Title}"
        assert fields["journal"] == "Quoted Journal"
        assert fields["volume"] == "7"
        assert fields["year"] == 2021

    def test_comments_and_special_blocks_are_skipped(self) -> None:
        entries = BibtexDecoder.decode(
            """
            % @article{commented, title = {Nope}}
            @comment{ignored, this is not an entry}
            @preamble{ "\\newcommand{\\noop}[1]{}" }
            @book{real, title = {Yes}}
            """
        )

        assert [e["key"] for e in entries] == ["real"]

    def test_string_definitions_are_substituted(self) -> None:
        entries = BibtexDecoder.decode(
            """
            @string{acm = "ACM Press"}
            @book{b, publisher = acm, title = {T}}
            """
        )

        assert entries[0]["publisher"] == "ACM Press"

    def test_unescape(self) -> None:
        assert BibtexDecoder.unescape(r"Smith \& Sons \_ 50\%") == "Smith & Sons _ 50%"
        assert BibtexDecoder.unescape("") == ""

    def test_unescape_accent_commands(self) -> None:
        assert BibtexDecoder.unescape(r"a\~{}b\^{}c") == "a~b^c"


class TestDecodeEntries:
    """Test building Entry objects."""

    def test_full_entry(self, sample_bibtex) -> None:
        entries = {e.key: e for e in BibtexDecoder.decode_entries(sample_bibtex)}

        book = entries["Klabnik2018"]
        assert book.type is EntryType.BOOK
        assert book.author == (
            Person("Klabnik", "Steve"),
            Person("Nichols", "Carol"),
        )
        assert book.year == 2018
        assert book.publisher == "No Starch Press"
        assert book.custom == {"isbn": "1593278284"}

        chapter = entries["Lee2015"]
        assert chapter.type is EntryType.INCOLLECTION
        assert chapter.editor == (
            Person("Smith", "John"),
            Person("Doe", "Jane Ann"),
        )
        assert chapter.booktitle == "Handbook of Things"

    def test_braces_removed_from_text_fields(self, bibliography) -> None:
        assert bibliography.get("Adams2010").title == "Early Work"

    def test_non_numeric_year_becomes_date(self) -> None:
        [entry] = BibtexDecoder.decode_entries("@misc{m, year = {n.d.}}")
        assert entry.year is None
        assert entry.date == "n.d."
        assert entry.exact_year is None

    def test_date_field(self) -> None:
        [entry] = BibtexDecoder.decode_entries("@online{o, date = {2019-04-01}}")
        assert entry.type is EntryType.ONLINE
        assert entry.exact_year == 2019

    def test_unknown_type_falls_back_to_misc(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            [entry] = BibtexDecoder.decode_entries("@standard{s, title = {ISO}}")

        assert entry.type is EntryType.MISC
        assert "Unknown entry type 'standard'" in caplog.text

    def test_missing_names(self) -> None:
        [entry] = BibtexDecoder.decode_entries("@misc{m, title = {T}}")
        assert entry.author is None
        assert entry.editor is None
