"""Centralized model definitions for Docs Server.

This package contains all Pydantic models organized by domain:
- api/: HTTP response models
- domain/: Core domain models
- config/: Configuration models
"""

from docs_server.models.api.system import *
from docs_server.models.config.server import *
from docs_server.models.domain.documents import *

__all__ = [
    # API models
    "HealthResponse",
    "NotFoundResponse",
    # Config models
    "ServerConfig",
    # Domain models
    "Document",
    "DocumentSummary",
    "ResourceContent",
]
