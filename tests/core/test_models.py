"""Tests for Person, Entry and Bibliography."""

import logging

import pytest

from bibcite.core.exceptions import BibliographyError
from bibcite.core.fields import EntryCategory, EntryType
from bibcite.core.models import Bibliography, Entry, Person


class TestPerson:
    """Test author records."""

    def test_initials(self) -> None:
        assert Person("Knuth", "Donald Ervin").initials == "DE"
        assert Person("Adams", "Douglas  Noel").initials == "DN"
        assert Person("Plato").initials == ""

    def test_ordering(self) -> None:
        """Family name decides first, then given name."""
        people = [
            Person("Zimmer", "Anna"),
            Person("Adams", "Zoe"),
            Person("Adams", "Bob"),
        ]
        assert sorted(people) == [
            Person("Adams", "Bob"),
            Person("Adams", "Zoe"),
            Person("Zimmer", "Anna"),
        ]


class TestEntry:
    """Test derived entry fields."""

    def test_exact_year_from_year(self) -> None:
        assert Entry(key="a", year=2018).exact_year == 2018

    @pytest.mark.parametrize(
        "date,expected",
        [
            ("2018", 2018),
            ("2018-05", 2018),
            ("2018-05-17", 2018),
            ("2001/2003", None),
            ("n.d.", None),
            ("", None),
        ],
    )
    def test_exact_year_from_date(self, date, expected) -> None:
        assert Entry(key="a", date=date).exact_year == expected

    def test_exact_year_unknown(self) -> None:
        assert Entry(key="a").exact_year is None

    @pytest.mark.parametrize(
        "pages,expected",
        [
            ("45--67", [(45, 67)]),
            ("45-67", [(45, 67)]),
            ("45–67", [(45, 67)]),
            ("12", [(12, 12)]),
            ("1--3, 7--9", [(1, 3), (7, 9)]),
            ("e1234", []),
            ("", []),
            (None, []),
        ],
    )
    def test_page_ranges(self, pages, expected) -> None:
        assert Entry(key="a", pages=pages).page_ranges == expected

    def test_publishers(self) -> None:
        entry = Entry(key="a", publisher="ACM and IEEE")
        assert entry.publishers == ("ACM", "IEEE")
        assert Entry(key="b").publishers == ()

    def test_immutable(self) -> None:
        entry = Entry(key="a")
        with pytest.raises(AttributeError):
            entry.title = "Changed"

    def test_category(self) -> None:
        assert Entry(key="a", type=EntryType.INPROCEEDINGS).type.category is (
            EntryCategory.INCOLLECTION
        )
        assert Entry(key="b", type=EntryType.PHDTHESIS).type.category is (
            EntryCategory.OTHER
        )


class TestBibliography:
    """Test the keyed entry collection."""

    def test_lookup(self, bibliography) -> None:
        entry = bibliography.get("Zimmer2020")
        assert entry is not None
        assert entry.title == "Late Work"
        assert bibliography.get("Missing") is None
        assert "Adams2010" in bibliography
        assert "Missing" not in bibliography

    def test_iteration_keeps_source_order(self, bibliography) -> None:
        assert [e.key for e in bibliography] == [
            "Klabnik2018",
            "Zimmer2020",
            "Adams2010",
            "Lee2015",
            "Anon",
        ]
        assert len(bibliography) == 5

    def test_duplicate_keys_first_wins(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            bib = Bibliography([Entry(key="a", title="One"), Entry(key="a", title="Two")])

        assert len(bib) == 1
        assert bib.get("a").title == "One"
        assert "Duplicate bibliography key ignored: a" in caplog.text

    def test_load(self, tmp_path, sample_bibtex) -> None:
        path = tmp_path / "refs.bib"
        path.write_text(sample_bibtex, encoding="utf-8")

        bib = Bibliography.load(path)
        assert len(bib) == 5

    def test_load_missing_file(self, tmp_path) -> None:
        path = tmp_path / "missing.bib"
        with pytest.raises(BibliographyError, match="Can't read bibliography"):
            Bibliography.load(path)

    def test_load_without_entries(self, tmp_path) -> None:
        path = tmp_path / "empty.bib"
        path.write_text("% nothing here\n", encoding="utf-8")

        with pytest.raises(BibliographyError, match="No valid bibliography") as exc:
            Bibliography.load(path)
        assert exc.value.path == str(path)
