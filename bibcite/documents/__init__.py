"""Documents as sequences of text and code nodes."""

from bibcite.documents.markdown import dump_markdown, parse_markdown
from bibcite.documents.models import CodeBlock, Document, Node, TextBlock

__all__ = [
    "Document",
    "Node",
    "TextBlock",
    "CodeBlock",
    "parse_markdown",
    "dump_markdown",
]
