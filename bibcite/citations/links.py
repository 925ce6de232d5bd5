"""Relative links from citing documents to a combined reference file."""

import logging
import os
from pathlib import PurePath

logger = logging.getLogger(__name__)

INVALID_PATH = "invalid path"


def link_prefix(document_path: PurePath | str, refs_file: PurePath | str) -> str:
    """Path from a document to the reference file, for use before ``#anchor``.

    Returns an empty string when the document is the reference file, and
    ``"invalid path"`` when no relative path exists (e.g. different
    drives on Windows).
    """
    document = os.path.normpath(document_path)
    target = os.path.normpath(refs_file)
    if document == target:
        return ""

    try:
        relative = os.path.relpath(target, start=os.path.dirname(document) or os.curdir)
    except ValueError as e:
        logger.warning(f"No relative path from {document_path} to {refs_file}: {e}")
        return INVALID_PATH

    return PurePath(relative).as_posix()
