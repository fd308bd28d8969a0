"""
Read-only registry of documentation sections.

The registry is built once from a sequence of documents and never changes
afterwards. It answers three queries: list, exact lookup by id, and a
case-insensitive substring search over titles and bodies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from docs_server.core.catalog import DEFAULT_DOCUMENTS
from docs_server.core.logging import get_logger
from docs_server.models.domain.documents import Document, DocumentSummary

logger = get_logger(__name__)


class DocumentRegistryError(Exception):
    """Raised when the document table is misconfigured."""


class DocumentNotFoundError(KeyError):
    """Raised when no document has the requested id."""

    def __init__(self, doc_id: str):
        super().__init__(doc_id)
        self.doc_id = doc_id

    def __str__(self) -> str:
        return f"Unknown document: {self.doc_id}"


class DocumentRegistry:
    """Immutable, ordered collection of documents."""

    def __init__(
        self,
        documents: Iterable[Document],
        product_name: str = "Claude Code",
    ):
        """Build the registry, rejecting duplicate document ids.

        Args:
            documents: Document records in the order they should be listed
            product_name: Label used when deriving listing descriptions

        Raises:
            DocumentRegistryError: If two documents share an id
        """
        self._documents: tuple[Document, ...] = tuple(documents)
        self._by_id: dict[str, Document] = {}
        for doc in self._documents:
            if doc.id in self._by_id:
                raise DocumentRegistryError(f"Duplicate document id: {doc.id}")
            self._by_id[doc.id] = doc
        self.product_name = product_name

        logger.debug("Document registry loaded", documents=len(self._documents))

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._by_id

    def list(self) -> list[DocumentSummary]:
        """Return a summary of every document in registration order."""
        return [
            DocumentSummary(
                id=doc.id,
                title=doc.title,
                description=f"{self.product_name} documentation: {doc.title}",
            )
            for doc in self._documents
        ]

    def get(self, doc_id: str) -> Document:
        """Return the document with exactly this id.

        Raises:
            DocumentNotFoundError: If the id is not registered
        """
        try:
            return self._by_id[doc_id]
        except KeyError:
            raise DocumentNotFoundError(doc_id) from None

    def find(self, doc_id: str) -> Document | None:
        """Return the document with this id, or None."""
        return self._by_id.get(doc_id)

    def search(self, query: str) -> list[Document]:
        """Return documents whose title or body contains the query.

        Matching is case-insensitive and literal. Results keep registration
        order and each document appears at most once. An empty query matches
        every document.

        Raises:
            ValueError: If query is None
        """
        if query is None:
            raise ValueError("Query is required")

        needle = query.lower()
        return [
            doc
            for doc in self._documents
            if needle in doc.title.lower() or needle in doc.body.lower()
        ]


def create_registry(
    documents: Iterable[Document] | None = None,
    product_name: str = "Claude Code",
) -> DocumentRegistry:
    """Build a registry, falling back to the built-in documentation table."""
    if documents is None:
        documents = DEFAULT_DOCUMENTS
    return DocumentRegistry(documents, product_name=product_name)


__all__ = [
    "DocumentNotFoundError",
    "DocumentRegistry",
    "DocumentRegistryError",
    "create_registry",
]
