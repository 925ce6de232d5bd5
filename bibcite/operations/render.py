"""Rendering citations across a set of documents.

Two layouts are supported:

- separate: every document gets its own registry and its own reference
  list, inserted at its own placeholder;
- combined: all documents share one registry and link to a single
  reference file (``refs_file``), which must be one of the documents.

Documents are always scanned in sorted path order, so numbering is the
same on every run.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any

from bibcite.citations.links import link_prefix
from bibcite.citations.references import insert_references
from bibcite.citations.registry import CitationRegistry
from bibcite.citations.scanner import scan_document
from bibcite.core.config import Config
from bibcite.core.exceptions import ConfigError
from bibcite.core.models import Bibliography
from bibcite.documents.models import Document

logger = logging.getLogger(__name__)

DocumentPath = PurePath | str


@dataclass
class RenderReport:
    """Outcome of a rendering run."""

    # Reference target -> cited keys in registry order
    citations: dict[str, list[str]] = field(default_factory=dict)
    # Document -> keys not found in the bibliography
    missing_keys: dict[str, list[str]] = field(default_factory=dict)
    # Reference targets with citations but no placeholder
    missing_placeholders: list[str] = field(default_factory=list)

    @property
    def total_citations(self) -> int:
        """Number of distinct cited keys over all reference targets."""
        return sum(len(keys) for keys in self.citations.values())

    @property
    def has_warnings(self) -> bool:
        return bool(self.missing_keys or self.missing_placeholders)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "citations": self.citations,
            "missing_keys": self.missing_keys,
            "missing_placeholders": self.missing_placeholders,
        }


def sorted_paths(documents: Mapping[DocumentPath, Document]) -> list[DocumentPath]:
    """Document paths in deterministic traversal order."""
    return sorted(documents, key=lambda p: PurePath(p).as_posix())


def find_document(
    documents: Mapping[DocumentPath, Document], path: DocumentPath
) -> DocumentPath | None:
    """Key of the document at ``path``.

    Paths are compared normalized first, then resolved against the
    working directory, so a relative ``path`` finds an absolute key.
    """
    target = os.path.normpath(path)
    for candidate in documents:
        if os.path.normpath(candidate) == target:
            return candidate

    resolved = Path(path).resolve()
    for candidate in documents:
        if Path(candidate).resolve() == resolved:
            return candidate
    return None


def render_documents(
    documents: Mapping[DocumentPath, Document],
    bibliography: Bibliography,
    config: Config,
) -> RenderReport:
    """Rewrite citation markers and insert reference lists in place.

    Raises:
        ConfigError: If ``refs_file`` is set but not among the documents.
            Nothing is rewritten in that case.
    """
    report = RenderReport()

    if config.refs_file:
        _render_combined(documents, bibliography, config, report, config.refs_file)
    else:
        _render_separate(documents, bibliography, config, report)

    logger.info(
        f"Rendered {report.total_citations} citations in {len(documents)} documents"
    )
    return report


def _render_combined(
    documents: Mapping[DocumentPath, Document],
    bibliography: Bibliography,
    config: Config,
    report: RenderReport,
    refs_file: str,
) -> None:
    refs_path = find_document(documents, refs_file)
    if refs_path is None:
        raise ConfigError(
            f"Reference output file {refs_file} not in the list of documents",
            field="refs-file",
        )

    registry = CitationRegistry()
    for path in sorted_paths(documents):
        prefix = link_prefix(path, refs_path)
        missing = scan_document(documents[path], registry, bibliography, config, prefix)
        if missing:
            report.missing_keys[str(path)] = missing

    _insert(refs_path, documents[refs_path], registry, bibliography, config, report)


def _render_separate(
    documents: Mapping[DocumentPath, Document],
    bibliography: Bibliography,
    config: Config,
    report: RenderReport,
) -> None:
    for path in sorted_paths(documents):
        document = documents[path]
        registry = CitationRegistry()
        missing = scan_document(document, registry, bibliography, config)
        if missing:
            report.missing_keys[str(path)] = missing
        _insert(path, document, registry, bibliography, config, report)


def _insert(
    path: DocumentPath,
    document: Document,
    registry: CitationRegistry,
    bibliography: Bibliography,
    config: Config,
    report: RenderReport,
) -> None:
    if len(registry):
        report.citations[str(path)] = list(registry)
    found = insert_references(path, document, registry, bibliography, config)
    if not found and len(registry):
        report.missing_placeholders.append(str(path))
