"""Host document model.

A document is an ordered list of nodes. Only text blocks are read and
rewritten by the citation pipeline; code blocks pass through untouched.
"""

from collections.abc import Iterator

import msgspec


class TextBlock(msgspec.Struct, tag="text", tag_field="kind"):
    """Prose lines, rewritten in place."""

    text: list[str] = msgspec.field(default_factory=list)


class CodeBlock(msgspec.Struct, tag="code", tag_field="kind"):
    """Fenced code, including its fence lines."""

    text: list[str] = msgspec.field(default_factory=list)


Node = TextBlock | CodeBlock


class Document(msgspec.Struct):
    """Ordered sequence of nodes."""

    nodes: list[Node] = msgspec.field(default_factory=list)

    def text_blocks(self) -> Iterator[TextBlock]:
        """Iterate over the text blocks in node order."""
        for node in self.nodes:
            if isinstance(node, TextBlock):
                yield node

    @classmethod
    def from_markdown(cls, text: str) -> "Document":
        from .markdown import parse_markdown

        return parse_markdown(text)

    def to_markdown(self) -> str:
        from .markdown import dump_markdown

        return dump_markdown(self)
