"""JSON pre-processor protocol.

A host tool pipes its parsed documents to ``bibcite plugin`` on stdin
and reads them back, rewritten, from stdout::

    {
      "context": {"name": "bibcite", "version": "1.0", "config": {...}},
      "documents": {"docs/intro.md": {"nodes": [{"kind": "text", "text": [...]}]}}
    }

The ``config`` table takes the same keys as a configuration file.
"""

import logging
from typing import Any, TextIO

import msgspec

from bibcite.core.config import Config
from bibcite.core.exceptions import ProtocolError
from bibcite.core.models import Bibliography
from bibcite.documents.models import Document
from bibcite.operations.render import RenderReport, render_documents

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "1.0"


class PluginContext(msgspec.Struct):
    """Invocation context sent by the host."""

    name: str = "bibcite"
    version: str = PROTOCOL_VERSION
    config: dict[str, Any] = msgspec.field(default_factory=dict)


class PluginData(msgspec.Struct):
    """Full pre-processor payload."""

    context: PluginContext = msgspec.field(default_factory=PluginContext)
    documents: dict[str, Document] = msgspec.field(default_factory=dict)


def read_input(stream: TextIO) -> PluginData:
    """Decode the payload from a text stream."""
    try:
        return msgspec.json.decode(stream.read(), type=PluginData)
    except msgspec.DecodeError as e:
        raise ProtocolError(f"Invalid pre-processor input: {e}") from e


def write_output(data: PluginData, stream: TextIO) -> None:
    """Encode the payload to a text stream."""
    stream.write(msgspec.json.encode(data).decode("utf-8"))
    stream.flush()


def check_version(context: PluginContext) -> None:
    """Warn when the host speaks a different protocol version."""
    if context.version != PROTOCOL_VERSION:
        logger.warning(
            f"The {context.name} plugin was built against protocol version "
            f"{PROTOCOL_VERSION}, but is being called with version {context.version}"
        )


def run_plugin(stdin: TextIO, stdout: TextIO) -> RenderReport:
    """Read a payload, render all documents and write the payload back.

    Input, configuration and bibliography are all checked before any
    output is written.
    """
    data = read_input(stdin)
    check_version(data.context)

    config = Config.from_mapping(data.context.config)
    bibliography = Bibliography.load(config.bibliography)

    report = render_documents(data.documents, bibliography, config)
    write_output(data, stdout)
    return report
