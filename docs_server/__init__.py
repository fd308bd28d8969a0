"""
Docs Server: documentation snippets over the Model Context Protocol.

A small MCP server that exposes a fixed set of documentation sections as
resources, plus a keyword search tool and a capabilities lookup tool.
"""

__version__ = "0.1.0"
