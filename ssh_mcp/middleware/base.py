"""Base middleware class for SSH MCP."""

import logging

from fastmcp.server.middleware import Middleware


class SSHMiddleware(Middleware):
    """FastMCP middleware with an injectable logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize middleware.

        Args:
            logger: Optional custom logger. Defaults to the subclass module logger.
        """
        self.logger = logger or logging.getLogger(type(self).__module__)
