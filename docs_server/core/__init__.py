"""Core document registry and supporting services."""

from docs_server.core.registry import (
    DocumentNotFoundError,
    DocumentRegistry,
    DocumentRegistryError,
    create_registry,
)

__all__ = [
    "DocumentNotFoundError",
    "DocumentRegistry",
    "DocumentRegistryError",
    "create_registry",
]
