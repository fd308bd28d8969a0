"""System and monitoring related API models."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    endpoints: dict[str, str] = Field(default_factory=dict)


class NotFoundResponse(BaseModel):
    """Body returned for unknown HTTP paths."""

    error: str = "Not found. Use /mcp for MCP protocol."


__all__ = ["HealthResponse", "NotFoundResponse"]
