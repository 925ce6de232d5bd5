"""Command-line interface for bibcite.

Built with Click and Rich.
"""

from bibcite.cli.main import cli

__all__ = ["cli"]
