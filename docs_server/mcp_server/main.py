"""Main MCP server for Docs Server."""

import asyncio
from collections.abc import Iterable

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from docs_server.core.logging import get_logger, setup_logging
from docs_server.core.registry import DocumentRegistry, create_registry
from docs_server.mcp_server.handlers import DocsRequestHandler
from docs_server.models.config.server import ServerConfig

logger = get_logger(__name__)


def create_server(
    registry: DocumentRegistry | None = None,
    config: ServerConfig | None = None,
) -> Server:
    """Create a low-level MCP server bound to a fresh request handler.

    Args:
        registry: Documents to serve; defaults to the built-in table
        config: Server configuration; defaults to environment settings

    Returns:
        A Server with resource and tool handlers registered
    """
    config = config or ServerConfig()
    if registry is None:
        registry = create_registry(product_name=config.product_name)
    handler = DocsRequestHandler(registry, config)

    server = Server(config.server_name)

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        """List documentation resources."""
        return handler.list_resources()

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        """Read a documentation resource."""
        content = handler.read_resource(uri)
        return [ReadResourceContents(content=content.text, mime_type=content.mime_type)]

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available MCP tools."""
        return handler.list_tools()

    # Registered directly so McpError from the handler is sent as a JSON-RPC
    # error instead of being folded into an isError tool result
    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        """Handle MCP tool calls."""
        content = handler.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


def initialization_options(server: Server, config: ServerConfig) -> InitializationOptions:
    return InitializationOptions(
        server_name=config.server_name,
        server_version=config.server_version,
        capabilities=server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )


async def run_stdio(config: ServerConfig | None = None) -> None:
    """Serve a single MCP connection over stdin/stdout."""
    config = config or ServerConfig()
    server = create_server(config=config)

    logger.info("Docs MCP server running on stdio", server=config.server_name)

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            initialization_options(server, config),
        )


def cli_main():
    """Synchronous entry point for the stdio server."""
    config = ServerConfig()
    setup_logging(config.log_level)
    asyncio.run(run_stdio(config))


if __name__ == "__main__":
    cli_main()
