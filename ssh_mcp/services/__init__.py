"""Services for SSH MCP."""

from ssh_mcp.services.connection import (
    ConnectionError,
    ExecutionError,
    execute_command,
)
from ssh_mcp.services.keys import (
    KeyResolutionError,
    explicit_key_path,
    key_candidates,
    resolve_private_key,
)
from ssh_mcp.services.results import (
    command_envelope,
    render_envelope,
    script_report,
    tool_failure,
)
from ssh_mcp.services.scripts import (
    ScriptExit,
    build_edit_block,
    build_read_lines,
    build_script,
    build_search_code,
    build_write_chunk,
)
from ssh_mcp.services.state import get_settings, reset_state, set_settings

__all__ = [
    "ConnectionError",
    "ExecutionError",
    "KeyResolutionError",
    "ScriptExit",
    "build_edit_block",
    "build_read_lines",
    "build_script",
    "build_search_code",
    "build_write_chunk",
    "command_envelope",
    "execute_command",
    "explicit_key_path",
    "get_settings",
    "key_candidates",
    "render_envelope",
    "reset_state",
    "resolve_private_key",
    "script_report",
    "set_settings",
    "tool_failure",
]
