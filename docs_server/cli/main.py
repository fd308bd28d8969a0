"""Main CLI entry point for Docs Server."""

import asyncio

import click
from pydantic import ValidationError

from docs_server.core.logging import setup_logging
from docs_server.models.config.server import LOG_LEVELS, ServerConfig

from .utils import console, echo_error, echo_info


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--stdio", is_flag=True, help="Serve a single MCP session on stdin/stdout")
@click.option("--host", default=None, help="Interface to bind in HTTP mode")
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on in HTTP mode (default: $PORT or 3000)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level",
)
@click.option("-v", "--version", is_flag=True, help="Show version information")
def cli(stdio, host, port, log_level, version):
    """Docs Server - documentation snippets over MCP.

    Runs an HTTP server with MCP event streams at /mcp and /sse by default,
    or a single stdio session with --stdio.

    Examples:
        docs-server                     # HTTP mode on $PORT (default 3000)
        docs-server --port 8080         # HTTP mode on port 8080
        docs-server --stdio             # stdio mode for local MCP clients
    """
    if version:
        from . import __version__

        console.print(f"Docs Server v{__version__}")
        return

    overrides = {
        key: value
        for key, value in {"host": host, "port": port, "log_level": log_level}.items()
        if value is not None
    }
    try:
        config = ServerConfig(**overrides)
    except ValidationError as e:
        echo_error(f"Invalid configuration: {e}")
        raise SystemExit(1)

    setup_logging(config.log_level)

    if stdio:
        from docs_server.mcp_server.main import run_stdio

        try:
            asyncio.run(run_stdio(config))
        except KeyboardInterrupt:
            echo_info("MCP server stopped by user")
        return

    from docs_server.api.main import run_http

    echo_info(f"Starting Docs Server on {config.host}:{config.port}")
    run_http(config)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
