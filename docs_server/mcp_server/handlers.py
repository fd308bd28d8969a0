"""Request handlers binding the MCP verbs to a document registry."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import mcp.types as types
from mcp.shared.exceptions import McpError

from docs_server.core.logging import get_logger
from docs_server.core.registry import DocumentNotFoundError, DocumentRegistry
from docs_server.mcp_server.tools import DocsServerTools
from docs_server.models.config.server import ServerConfig
from docs_server.models.domain.documents import Document, ResourceContent

logger = get_logger(__name__)

MIME_TYPE = "text/plain"


def render_document(doc: Document) -> str:
    """Render a full document for a resource read."""
    text = f"# {doc.title}\n\n{doc.body}"
    if doc.url:
        text += f"\n\nSource: {doc.url}"
    return text


class DocsRequestHandler:
    """Serves list/read resource and list/call tool requests.

    One instance is created per connection. Every operation is a pure
    function of the registry and its input.
    """

    def __init__(self, registry: DocumentRegistry, config: ServerConfig | None = None):
        self.registry = registry
        self.config = config or ServerConfig()
        self.tools = DocsServerTools(registry, product_name=self.config.product_name)

    def locator(self, doc_id: str) -> str:
        return f"{self.config.resource_prefix}{doc_id}"

    def parse_locator(self, uri: str) -> str:
        """Extract the document id from ``{scheme}://docs/{id}``.

        Raises:
            McpError: INVALID_REQUEST if the locator has another shape
        """
        parts = urlsplit(uri)
        doc_id = parts.path.strip("/")
        if (
            parts.scheme.lower() != self.config.uri_scheme
            or parts.netloc != "docs"
            or not doc_id
        ):
            raise self._invalid_request(f"Unknown document: {doc_id or uri}")
        return doc_id

    def list_resources(self) -> list[types.Resource]:
        """List every document as a text resource."""
        return [
            types.Resource(
                uri=self.locator(summary.id),
                name=summary.title,
                mimeType=MIME_TYPE,
                description=summary.description,
            )
            for summary in self.registry.list()
        ]

    def read_resource(self, uri: Any) -> ResourceContent:
        """Read one document by locator.

        Raises:
            McpError: INVALID_REQUEST if no document matches the locator
        """
        uri = str(uri)
        doc_id = self.parse_locator(uri)
        try:
            doc = self.registry.get(doc_id)
        except DocumentNotFoundError as e:
            raise self._invalid_request(str(e)) from e

        return ResourceContent(uri=uri, mime_type=MIME_TYPE, text=render_document(doc))

    def list_tools(self) -> list[types.Tool]:
        """List the tools this server can run."""
        return self.tools.definitions()

    def call_tool(
        self, name: str, arguments: Mapping[str, Any] | None
    ) -> list[types.TextContent]:
        """Run a tool and wrap its output in a single text block.

        Raises:
            McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for
                missing arguments
        """
        entry = self.tools.get(name)
        if entry is None:
            logger.warning("Unknown tool requested", tool=name)
            raise McpError(
                types.ErrorData(
                    code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}"
                )
            )

        logger.debug("Calling tool", tool=name)
        try:
            text = entry.handler(arguments or {})
        except McpError as e:
            logger.warning("Tool call rejected", tool=name, error=e.error.message)
            raise

        return [types.TextContent(type="text", text=text)]

    @staticmethod
    def _invalid_request(message: str) -> McpError:
        logger.warning("Invalid resource request", error=message)
        return McpError(types.ErrorData(code=types.INVALID_REQUEST, message=message))
