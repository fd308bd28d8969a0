"""FastAPI application serving Docs Server over MCP event streams."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from mcp.server.sse import SseServerTransport
from starlette.exceptions import HTTPException as StarletteHTTPException

from docs_server import __version__
from docs_server.core.logging import get_logger
from docs_server.mcp_server.main import create_server, initialization_options
from docs_server.models.api.system import HealthResponse, NotFoundResponse
from docs_server.models.config.server import ServerConfig

logger = get_logger(__name__)

MESSAGES_PATH = "/messages/"

ENDPOINTS = {
    "mcp": f"/mcp (GET for event stream, POST {MESSAGES_PATH} for requests)",
    "sse": "/sse",
    "health": "/health",
}


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Create the HTTP application.

    Each GET on ``/sse`` or ``/mcp`` opens an event stream served by its own
    MCP server instance; clients post their requests to ``/messages/``.
    """
    config = config or ServerConfig()
    sse = SseServerTransport(MESSAGES_PATH)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        base_url = f"http://localhost:{config.port}"
        logger.info("MCP Server running", port=config.port)
        logger.info("Docs MCP Server ready", server=config.server_name)
        logger.info(f"MCP endpoint: {base_url}/mcp")
        logger.info(f"Health check: {base_url}/health")
        yield
        logger.info("Shutting down Docs MCP Server")

    app = FastAPI(
        title="Docs Server",
        description="Documentation snippets over the Model Context Protocol",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        """Return a JSON body for unknown paths."""
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content=NotFoundResponse().model_dump())
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "type": "internal_error"},
        )

    @app.get("/", response_model=HealthResponse)
    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="Claude Code MCP Server Running",
            timestamp=datetime.now(timezone.utc),
            endpoints=ENDPOINTS,
        )

    async def handle_sse(request: Request) -> Response:
        client = request.client.host if request.client else "unknown"
        logger.info("Inbound MCP connection", client=client, path=request.url.path)

        server = create_server(config=config)
        async with sse.connect_sse(
            request.scope, request.receive, request._send
        ) as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                initialization_options(server, config),
            )

        logger.info("MCP connection closed", client=client)
        return Response()

    app.add_route("/sse", handle_sse, methods=["GET"])
    app.add_route("/mcp", handle_sse, methods=["GET"])
    app.mount(MESSAGES_PATH, app=sse.handle_post_message)

    return app


def run_http(config: ServerConfig | None = None) -> None:
    """Serve the HTTP application with uvicorn."""
    import uvicorn

    config = config or ServerConfig()
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


app = create_app()


if __name__ == "__main__":
    run_http()
