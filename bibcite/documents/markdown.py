"""Splitting Markdown into text and fenced code nodes."""

import re

from .models import CodeBlock, Document, TextBlock

_FENCE_OPEN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")


def parse_markdown(text: str) -> Document:
    """Split Markdown source into text and code blocks.

    Fences open with three or more backticks or tildes (indented by at
    most three spaces) and close on a line holding only a fence of the
    same character that is at least as long. An unclosed fence runs to
    the end of the document.

    ``dump_markdown(parse_markdown(text)) == text`` holds for any input.
    """
    nodes: list[TextBlock | CodeBlock] = []
    current: list[str] = []
    fence: str | None = None

    for line in text.split("\n"):
        if fence is None:
            match = _FENCE_OPEN.match(line)
            if match:
                fence_str = match.group("fence")
                # Backtick fences can't have backticks in the info string
                if fence_str[0] == "`" and "`" in line[match.end() :]:
                    current.append(line)
                    continue
                if current:
                    nodes.append(TextBlock(text=current))
                current = [line]
                fence = fence_str
            else:
                current.append(line)
        else:
            current.append(line)
            if _closes(line, fence):
                nodes.append(CodeBlock(text=current))
                current = []
                fence = None

    if current:
        if fence is None:
            nodes.append(TextBlock(text=current))
        else:
            nodes.append(CodeBlock(text=current))

    return Document(nodes=nodes)


def _closes(line: str, fence: str) -> bool:
    stripped = line.strip()
    if len(line) - len(line.lstrip(" ")) > 3:
        return False
    return (
        len(stripped) >= len(fence)
        and set(stripped) == {fence[0]}
    )


def dump_markdown(document: Document) -> str:
    """Join all nodes back into Markdown source."""
    lines: list[str] = []
    for node in document.nodes:
        lines.extend(node.text)
    return "\n".join(lines)
