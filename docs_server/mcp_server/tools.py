"""MCP tools for Docs Server."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import mcp.types as types
from mcp.shared.exceptions import McpError

from docs_server.core.catalog import CAPABILITIES_DOCUMENT_ID
from docs_server.core.logging import get_logger
from docs_server.core.registry import DocumentRegistry
from docs_server.models.domain.documents import Document

logger = get_logger(__name__)

SEARCH_DOCS = "search_docs"
GET_CAPABILITIES = "get_capabilities"

CAPABILITIES_FALLBACK = "Capabilities information not available"
SECTION_SEPARATOR = "\n\n---\n\n"

ToolHandler = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class ToolEntry:
    """A tool definition paired with the function that runs it."""

    definition: types.Tool
    handler: ToolHandler


def render_section(doc: Document) -> str:
    """Render a document as a search result section."""
    text = f"## {doc.title}\n{doc.body}"
    if doc.url:
        text += f"\nSource: {doc.url}"
    return text


def render_search_results(query: str, results: list[Document]) -> str:
    """Render search results as a single text block."""
    if not results:
        return f'No documentation found matching "{query}"'
    sections = SECTION_SEPARATOR.join(render_section(doc) for doc in results)
    return f"Found {len(results)} relevant sections:\n\n{sections}"


def invalid_params(message: str) -> McpError:
    return McpError(types.ErrorData(code=types.INVALID_PARAMS, message=message))


class DocsServerTools:
    """Collection of MCP tools over a document registry."""

    def __init__(self, registry: DocumentRegistry, product_name: str = "Claude Code"):
        """Initialize tools and build the name -> tool table."""
        self.registry = registry
        self.product_name = product_name
        self._table = self._build_table()

    def _build_table(self) -> dict[str, ToolEntry]:
        entries = [
            ToolEntry(
                definition=types.Tool(
                    name=SEARCH_DOCS,
                    description=(
                        f"Search through {self.product_name} documentation "
                        "for specific information"
                    ),
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "query": {
                                "type": "string",
                                "description": (
                                    f"Search query for {self.product_name} documentation"
                                ),
                            }
                        },
                        "required": ["query"],
                    },
                ),
                handler=self.search_docs,
            ),
            ToolEntry(
                definition=types.Tool(
                    name=GET_CAPABILITIES,
                    description=(
                        f"Get information about {self.product_name} "
                        "capabilities and features"
                    ),
                    inputSchema={"type": "object", "properties": {}},
                ),
                handler=self.get_capabilities,
            ),
        ]

        table: dict[str, ToolEntry] = {}
        for entry in entries:
            name = entry.definition.name
            if name in table:
                raise ValueError(f"Duplicate tool name: {name}")
            table[name] = entry
        return table

    @property
    def names(self) -> list[str]:
        return list(self._table)

    def definitions(self) -> list[types.Tool]:
        """Return the tool definitions in declaration order."""
        return [entry.definition for entry in self._table.values()]

    def get(self, name: str) -> ToolEntry | None:
        return self._table.get(name)

    def search_docs(self, arguments: Mapping[str, Any]) -> str:
        """Search titles and bodies for a literal, case-insensitive query.

        Args:
            arguments: Tool arguments; must contain a string ``query``

        Returns:
            Rendered results, or a no-results message naming the query

        Raises:
            McpError: INVALID_PARAMS if ``query`` is missing or not a string
        """
        query = arguments.get("query")
        if not isinstance(query, str):
            raise invalid_params("Query is required")

        results = self.registry.search(query)
        logger.debug("Searched documentation", query=query, matches=len(results))
        return render_search_results(query, results)

    def get_capabilities(self, arguments: Mapping[str, Any]) -> str:
        """Return the overview document body, or a fallback if it is absent or empty."""
        doc = self.registry.find(CAPABILITIES_DOCUMENT_ID)
        if doc is None or not doc.body:
            return CAPABILITIES_FALLBACK
        return doc.body
