"""MCP tools for SSH MCP, keyed by their wire names."""

from collections.abc import Awaitable, Callable

from ssh_mcp.models import ToolName
from ssh_mcp.tools.files import edit_block, read_lines, search_code, write_chunk
from ssh_mcp.tools.remote import remote_ssh

TOOLS: dict[ToolName, Callable[..., Awaitable[str]]] = {
    ToolName.REMOTE_SSH: remote_ssh,
    ToolName.EDIT_BLOCK: edit_block,
    ToolName.READ_LINES: read_lines,
    ToolName.SEARCH_CODE: search_code,
    ToolName.WRITE_CHUNK: write_chunk,
}

__all__ = [
    "TOOLS",
    "edit_block",
    "read_lines",
    "remote_ssh",
    "search_code",
    "write_chunk",
]
