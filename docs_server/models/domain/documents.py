"""Document-related domain models."""

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A static documentation section with an optional external reference."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable identifier, unique per registry")
    title: str
    body: str = Field(description="Multi-paragraph text content")
    url: str | None = Field(default=None, description="Canonical external link")


class DocumentSummary(BaseModel):
    """Listing entry derived from a document."""

    id: str
    title: str
    description: str


class ResourceContent(BaseModel):
    """Rendered contents of a single document resource."""

    uri: str
    mime_type: str = "text/plain"
    text: str


__all__ = ["Document", "DocumentSummary", "ResourceContent"]
