"""Pytest configuration and shared fixtures."""

import pytest

from bibcite.core.config import CitationStyle, Config
from bibcite.core.models import Bibliography

SAMPLE_BIBTEX = r"""
% Test bibliography
@book{Klabnik2018,
    author = {Klabnik, Steve and Nichols, Carol},
    title = {The Rust Programming Language},
    year = {2018},
    isbn = {1593278284},
    publisher = {No Starch Press},
}

@article{Zimmer2020,
    author = {Zimmer, Anna},
    title = {Late Work},
    journal = {Journal of Tests},
    volume = {12},
    number = {3},
    pages = {45--67},
    year = {2020},
}

@article{Adams2010,
    author = {Adams, Douglas Noel},
    title = {Early {Work}},
    journal = {Annals},
    year = 2010,
}

@incollection{Lee2015,
    author = {Lee, Kim and Park, Jin and Choi, Min},
    title = {Neural Things},
    editor = {Smith, John and Doe, Jane Ann},
    booktitle = {Handbook of Things},
    pages = {100--110},
    publisher = {Springer},
    address = {Berlin},
    year = {2015},
}

@misc{Anon,
    title = {Untitled Report},
}
"""


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep configuration environment variables out of every test."""
    for variable in ("BIBCITE_BIBLIOGRAPHY", "BIBCITE_STYLE", "BIBCITE_REFS_FILE"):
        monkeypatch.delenv(variable, raising=False)
    yield


@pytest.fixture
def sample_bibtex() -> str:
    """BibTeX source covering every formatting category."""
    return SAMPLE_BIBTEX


@pytest.fixture
def bibliography(sample_bibtex) -> Bibliography:
    """Parsed sample bibliography."""
    return Bibliography.parse(sample_bibtex)


@pytest.fixture
def config() -> Config:
    """Default configuration: author-year, linked, keys rendered."""
    return Config()


@pytest.fixture
def index_config() -> Config:
    """Numbered citation style."""
    return Config(style=CitationStyle.INDEX)
