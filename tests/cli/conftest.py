"""Pytest configuration and fixtures for CLI tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click CLI test runner that always targets the bibcite group."""

    class BibciteCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            from bibcite.cli.main import cli

            if isinstance(args, list):
                return super().invoke(cli, args, **kwargs)
            return super().invoke(args, **kwargs)

    return BibciteCliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch, sample_bibtex):
    """Working directory holding the default bibliography file."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bibliography.bib").write_text(sample_bibtex, encoding="utf-8")
    return tmp_path


@pytest.fixture
def paper(project):
    """Markdown document citing one known entry."""
    path = project / "paper.md"
    path.write_text("# Paper\n\nCite @Adams2010.\n\n[[_REFS_]]\n", encoding="utf-8")
    return path
