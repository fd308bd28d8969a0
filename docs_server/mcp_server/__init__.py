"""MCP server for Docs Server.

This module exposes the documentation registry over the Model Context
Protocol: documents as resources, plus search and capabilities tools.
"""

__version__ = "0.1.0"
