"""Per-call logging for the SSH tools.

Tool bodies never raise for remote failures; they return an error line
or a ``success: false`` envelope. This middleware reads those responses
back so a failed call is visible in the log without payload logging.
"""

import json
import logging
import re
import time
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from ssh_mcp.config.constants import DEFAULT_PORT
from ssh_mcp.middleware.base import SSHMiddleware

# Arguments whose values are logged as a length only
BULK_ARGUMENTS = frozenset({"content", "oldText", "newText"})

# Arguments folded into the user@host:port endpoint
TARGET_ARGUMENTS = frozenset({"host", "user", "port"})

EXIT_CODE = re.compile(r"(?:\[exit code: |^Exit code: )(-?\d+)\]?\s*$", re.MULTILINE)


def _endpoint(args: dict[str, Any]) -> str:
    host = args.get("host", "?")
    user = args.get("user", "?")
    port = args.get("port", DEFAULT_PORT)
    return f"{user}@{host}:{port}"


def _result_text(result: Any) -> str | None:
    """Text of the first content block of a tool result, if any."""
    if isinstance(result, str):
        return result
    content = getattr(result, "content", None)
    if isinstance(content, (list, tuple)) and content:
        text = getattr(content[0], "text", None)
        if isinstance(text, str):
            return text
    return None


def describe_outcome(text: str | None) -> str | None:
    """Failure description for a tool response, or None when it succeeded.

    Recognizes the ``Error: ...`` line of the file tools, the remote-ssh
    envelope with ``success: false`` and a trailing nonzero exit code.
    """
    if text is None:
        return None
    if text.startswith("Error: "):
        return text
    if text.startswith("{"):
        try:
            envelope = json.loads(text)
        except ValueError:
            return None
        if isinstance(envelope, dict) and envelope.get("success") is False:
            return f"Error: {envelope.get('error')}"
        return None

    codes = EXIT_CODE.findall(text)
    if codes and codes[-1] != "0":
        return f"exit code {codes[-1]}"
    return None


class LoggingMiddleware(SSHMiddleware):
    """Logs each tool call with its endpoint, outcome and duration.

    Example:
        >>> mcp.add_middleware(LoggingMiddleware(slow_threshold_ms=500))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_payloads: bool = False,
        max_payload_length: int = 1000,
        slow_threshold_ms: float = 1000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            include_payloads: Whether to log clipped arguments and responses at DEBUG.
            max_payload_length: Characters kept when clipping payloads.
            slow_threshold_ms: Calls at or above this duration log at WARNING.
        """
        super().__init__(logger=logger)
        self.include_payloads = include_payloads
        self.max_payload_length = max_payload_length
        self.slow_threshold_ms = slow_threshold_ms

    def _clip(self, data: Any) -> str:
        text = data if isinstance(data, str) else json.dumps(data, default=str)
        if len(text) <= self.max_payload_length:
            return text
        return f"{text[: self.max_payload_length]}... [truncated]"

    def _format_args(self, args: dict[str, Any]) -> str:
        """One-line argument summary without the target fields or bulk text."""
        parts = []
        for key, value in args.items():
            if key in TARGET_ARGUMENTS or value is None:
                continue
            if key in BULK_ARGUMENTS and isinstance(value, str):
                parts.append(f"{key}=<{len(value)} chars>")
            elif isinstance(value, str) and len(value) > 50:
                parts.append(f"{key}={value[:50] + '...'!r}")
            else:
                parts.append(f"{key}={value!r}")
        return f"({', '.join(parts)})"

    def _format_duration(self, duration_ms: float) -> str:
        if duration_ms >= self.slow_threshold_ms:
            return f"{duration_ms:.1f}ms SLOW!"
        return f"{duration_ms:.1f}ms"

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log the call, then its outcome and duration."""
        start = time.perf_counter()
        tool_name = getattr(context.message, "name", "unknown")
        args = getattr(context.message, "arguments", None) or {}
        endpoint = _endpoint(args)

        self.logger.info(
            ">>> TOOL: %s on %s%s", tool_name, endpoint, self._format_args(args)
        )
        if self.include_payloads:
            self.logger.debug("    Args: %s", self._clip(args))

        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.error(
                "!!! TOOL: %s on %s -> %s: %s [%s]",
                tool_name,
                endpoint,
                type(e).__name__,
                e,
                self._format_duration(duration_ms),
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        text = _result_text(result)
        failure = describe_outcome(text)
        slow = duration_ms >= self.slow_threshold_ms
        level = logging.WARNING if failure or slow else logging.INFO
        summary = failure or (f"{len(text)} chars" if text is not None else "no text")
        self.logger.log(
            level,
            "<<< TOOL: %s on %s -> %s [%s]",
            tool_name,
            endpoint,
            summary,
            self._format_duration(duration_ms),
        )
        if self.include_payloads and text is not None:
            self.logger.debug("    Result: %s", self._clip(text))
        return result

    async def on_list_tools(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log tool listing requests."""
        result = await call_next(context)
        tool_count = len(result) if isinstance(result, (list, tuple)) else "?"
        self.logger.debug("<<< LIST TOOLS -> %s tool(s)", tool_count)
        return result
