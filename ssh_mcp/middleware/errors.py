"""Error accounting for requests that fail at the protocol level.

Tool bodies turn their own failures into responses, so what reaches this
middleware is an unknown tool, a malformed argument envelope or a bug.
"""

import logging
from collections import Counter
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from ssh_mcp.middleware.base import SSHMiddleware


class ErrorHandlingMiddleware(SSHMiddleware):
    """Logs and counts exceptions by type, then re-raises them."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to log the full traceback.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: Counter[str] = Counter()

    def get_error_stats(self) -> dict[str, int]:
        """Return error counts keyed by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        """Reset error statistics."""
        self._error_counts.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Pass the request through, recording any exception it raises.

        Raises:
            Exception: The original exception, after logging.
        """
        try:
            return await call_next(context)
        except Exception as e:
            error_type = type(e).__name__
            self._error_counts[error_type] += 1
            self.logger.error(
                "Error in %s: %s: %s",
                context.method,
                error_type,
                e,
                exc_info=self.include_traceback,
            )
            raise
