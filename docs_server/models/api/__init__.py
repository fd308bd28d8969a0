"""HTTP response models for Docs Server."""

from docs_server.models.api.system import *

__all__ = ["HealthResponse", "NotFoundResponse"]
