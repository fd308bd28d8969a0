"""Domain models for Docs Server."""

from docs_server.models.domain.documents import *

__all__ = ["Document", "DocumentSummary", "ResourceContent"]
