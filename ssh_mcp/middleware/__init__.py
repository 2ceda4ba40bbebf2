"""SSH MCP middleware components."""

from ssh_mcp.middleware.base import SSHMiddleware
from ssh_mcp.middleware.errors import ErrorHandlingMiddleware
from ssh_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "SSHMiddleware",
]
