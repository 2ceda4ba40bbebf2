"""Colour console log formatter for stderr."""

import logging
import re
from datetime import datetime

RESET = "\033[0m"
DIM = "\033[2m"

LEVEL_COLORS = {
    "DEBUG": "\033[90m",
    "INFO": "\033[92m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
    "CRITICAL": "\033[41m\033[37m\033[1m",
}

# Logger name prefix -> colour, first match wins
COMPONENT_COLORS = (
    ("ssh_mcp.server", "\033[96m"),
    ("ssh_mcp.services.connection", "\033[95m"),
    ("ssh_mcp.services", "\033[35m"),
    ("ssh_mcp.tools", "\033[94m"),
    ("ssh_mcp.middleware", "\033[33m"),
    ("ssh_mcp.config", "\033[32m"),
)

HIGHLIGHTS = (
    (re.compile(r"(\w[\w.\-]*@[\w.\-]+:\d+)"), "\033[95m"),  # user@host:port
    (re.compile(r"(\d+\.?\d*ms)"), "\033[93m"),  # durations
    (re.compile(r"(exit(?:_status| code)?[=: ]+-?\d+)"), "\033[96m"),
)


class ConsoleFormatter(logging.Formatter):
    """Formats ``time | level | component | message`` with optional colours."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to emit ANSI colour codes.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{RESET}"

    def _component(self, name: str) -> str:
        color = "\033[37m"
        for prefix, prefix_color in COMPONENT_COLORS:
            if name.startswith(prefix):
                color = prefix_color
                break
        short = name.removeprefix("ssh_mcp.")
        return self._colorize(f"{short:<22}", color)

    def _highlight(self, message: str) -> str:
        if not self.use_colors:
            return message
        for pattern, color in HIGHLIGHTS:
            message = pattern.sub(f"{color}\\1{RESET}", message)
        return message

    def format(self, record: logging.LogRecord) -> str:
        """Format the record on a single line (plus traceback, if any)."""
        dt = datetime.fromtimestamp(record.created)
        timestamp = self._colorize(
            f"{dt:%H:%M:%S}.{int(record.msecs):03d} {dt:%m/%d}", DIM
        )
        level = self._colorize(
            f"{record.levelname:<8}", LEVEL_COLORS.get(record.levelname, "")
        )
        sep = self._colorize("|", DIM)
        message = self._highlight(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {self._component(record.name)} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
