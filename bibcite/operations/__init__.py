"""Rendering operations over whole document sets."""

from bibcite.operations.render import (
    RenderReport,
    find_document,
    render_documents,
    sorted_paths,
)

__all__ = [
    "RenderReport",
    "render_documents",
    "sorted_paths",
    "find_document",
]
