"""Command-line interface for Docs Server."""

from docs_server import __version__

__all__ = ["__version__"]
