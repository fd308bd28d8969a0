"""Configuration models for Docs Server."""

from docs_server.models.config.server import *

__all__ = ["ServerConfig"]
