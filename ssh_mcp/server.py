"""SSH MCP FastMCP server.

Thin wiring of the five tools and the middleware stack. All behaviour
lives in the tools/ and services/ modules.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from ssh_mcp import __version__
from ssh_mcp.config import Settings
from ssh_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from ssh_mcp.services import get_settings
from ssh_mcp.tools import TOOLS
from ssh_mcp.utils.console import ConsoleFormatter

NOISY_LOGGERS = (
    "asyncssh",
    "fastmcp",
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "starlette",
    "anyio",
)


def configure_logging(settings: Settings) -> None:
    """Send ``ssh_mcp`` logs to stderr; stdout carries the stdio transport."""
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("ssh_mcp")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ConsoleFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging(get_settings())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Log startup and shutdown; sessions are per call, so nothing to clean up.

    Yields:
        Dict with the registered tool names
    """
    settings = get_settings()
    logger.info("SSH MCP server v%s starting up", __version__)

    if settings.known_hosts is None:
        logger.warning(
            "SSH host key verification DISABLED. "
            "Set SSH_MCP_KNOWN_HOSTS to a known_hosts file to enable it."
        )
    else:
        logger.info("SSH host key verification enabled (known_hosts=%s)", settings.known_hosts)

    tool_names = [str(name) for name in TOOLS]
    logger.info("Tools ready: %s", ", ".join(tool_names))

    try:
        yield {"tools": tool_names}
    finally:
        logger.info("SSH MCP server shutdown complete")


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware: ErrorHandling (innermost) then Logging."""
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=settings.slow_threshold_ms,
        )
    )


def create_server() -> FastMCP:
    """Create the MCP server with its tools and middleware.

    Returns:
        Configured FastMCP server instance
    """
    settings = get_settings()
    server = FastMCP("ssh-mcp-server", version=__version__, lifespan=app_lifespan)

    configure_middleware(server, settings)

    # Tools return plain text (JSON text for remote-ssh), not structured output
    for name, fn in TOOLS.items():
        server.tool(name=str(name), output_schema=None)(fn)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
