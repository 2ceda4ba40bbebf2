"""Utilities for SSH MCP."""

from ssh_mcp.utils.console import ConsoleFormatter
from ssh_mcp.utils.shell import (
    escape_sed_pattern,
    escape_sed_replacement,
    quote_content,
    quote_path,
)
from ssh_mcp.utils.validation import (
    ValidationError,
    validate_args,
    validate_host,
    validate_path,
    validate_port,
)

__all__ = [
    "ConsoleFormatter",
    "escape_sed_pattern",
    "escape_sed_replacement",
    "quote_content",
    "quote_path",
    "validate_args",
    "validate_host",
    "validate_path",
    "validate_port",
    "ValidationError",
]
