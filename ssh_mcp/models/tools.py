"""Typed arguments for the five SSH tools.

Each tool has its own frozen argument structure; ``ToolArgs`` is the
closed set of them. The shared connection fields live in ``SSHTarget``.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Literal

from ssh_mcp.config.constants import DEFAULT_PORT


class ToolName(StrEnum):
    """Wire names of the registered tools."""

    REMOTE_SSH = "remote-ssh"
    EDIT_BLOCK = "edit-block"
    READ_LINES = "read-lines"
    SEARCH_CODE = "search-code"
    WRITE_CHUNK = "write-chunk"


WriteMode = Literal["rewrite", "append"]


@dataclass(frozen=True)
class SSHTarget:
    """Where and as whom a tool runs."""

    host: str
    user: str
    private_key_path: str | None = None
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class RemoteCommandArgs:
    """Arguments for remote-ssh."""

    tool: ClassVar[ToolName] = ToolName.REMOTE_SSH

    target: SSHTarget
    command: str


@dataclass(frozen=True)
class EditBlockArgs:
    """Arguments for edit-block."""

    tool: ClassVar[ToolName] = ToolName.EDIT_BLOCK

    target: SSHTarget
    file_path: str
    old_text: str
    new_text: str
    expected_replacements: int = 1


@dataclass(frozen=True)
class ReadLinesArgs:
    """Arguments for read-lines."""

    tool: ClassVar[ToolName] = ToolName.READ_LINES

    target: SSHTarget
    file_path: str
    start_line: int = 1
    end_line: int | None = None
    max_lines: int = 100

    @property
    def effective_end(self) -> int:
        """Last line to read: end_line, or max_lines lines from start_line."""
        if self.end_line is not None:
            return self.end_line
        return self.start_line + self.max_lines - 1


@dataclass(frozen=True)
class SearchCodeArgs:
    """Arguments for search-code."""

    tool: ClassVar[ToolName] = ToolName.SEARCH_CODE

    target: SSHTarget
    path: str
    pattern: str
    file_pattern: str | None = None
    ignore_case: bool = False
    max_results: int = 50
    context_lines: int = 2


@dataclass(frozen=True)
class WriteChunkArgs:
    """Arguments for write-chunk."""

    tool: ClassVar[ToolName] = ToolName.WRITE_CHUNK

    target: SSHTarget
    file_path: str
    content: str
    mode: WriteMode = "rewrite"


FileToolArgs = EditBlockArgs | ReadLinesArgs | SearchCodeArgs | WriteChunkArgs
ToolArgs = RemoteCommandArgs | FileToolArgs
