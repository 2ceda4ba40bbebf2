"""Data models for SSH MCP."""

from ssh_mcp.models.connection import ConnectionRequest, ExecutionResult
from ssh_mcp.models.tools import (
    EditBlockArgs,
    FileToolArgs,
    ReadLinesArgs,
    RemoteCommandArgs,
    SearchCodeArgs,
    SSHTarget,
    ToolArgs,
    ToolName,
    WriteChunkArgs,
    WriteMode,
)

__all__ = [
    "ConnectionRequest",
    "EditBlockArgs",
    "ExecutionResult",
    "FileToolArgs",
    "ReadLinesArgs",
    "RemoteCommandArgs",
    "SearchCodeArgs",
    "SSHTarget",
    "ToolArgs",
    "ToolName",
    "WriteChunkArgs",
    "WriteMode",
]
