"""File operation tools: edit-block, read-lines, search-code, write-chunk.

Each tool synthesizes one remote script, runs it in a single session and
returns the script's report as plain text. Any error becomes a single
``Error: ...`` line instead of propagating.
"""

import logging
from typing import Literal

from ssh_mcp.config import DEFAULT_PORT
from ssh_mcp.models import (
    EditBlockArgs,
    FileToolArgs,
    ReadLinesArgs,
    SearchCodeArgs,
    SSHTarget,
    WriteChunkArgs,
)
from ssh_mcp.services import ScriptExit, build_script, script_report, tool_failure
from ssh_mcp.tools.handlers import run_on_target
from ssh_mcp.utils.validation import validate_args

logger = logging.getLogger(__name__)


async def _run_file_tool(args: FileToolArgs, always_show_exit_code: bool = False) -> str:
    """Validate, synthesize, execute and render one file operation."""
    try:
        validate_args(args)
        script = build_script(args)
        result = await run_on_target(args.target, script)
    except Exception as e:
        logger.warning("%s on %s failed: %s", args.tool, args.target.host, e)
        return tool_failure(args.tool, e)

    if result.exit_status not in (None, ScriptExit.OK):
        logger.warning(
            "%s on %s reported exit code %s",
            args.tool,
            args.target.host,
            result.exit_status,
        )
    return script_report(result, always_show_exit_code=always_show_exit_code)


async def edit_block(
    host: str,
    user: str,
    filePath: str,  # noqa: N803
    oldText: str,  # noqa: N803
    newText: str,  # noqa: N803
    expectedReplacements: int = 1,  # noqa: N803
    privateKeyPath: str | None = None,  # noqa: N803
    port: int = DEFAULT_PORT,
) -> str:
    """Replace a line of text in a remote file, keeping a timestamped backup.

    Matching and replacement are literal: regex metacharacters in oldText
    and & or backslashes in newText carry no special meaning.
    Exits with code 2 ("pattern not found") and leaves the file untouched
    when oldText does not occur.

    Args:
        host: Remote server hostname or IP address
        user: SSH username
        filePath: File to edit
        oldText: Text to search for (single line)
        newText: Replacement text
        expectedReplacements: Number of occurrences expected (default: 1);
            a mismatch is reported as a warning
        privateKeyPath: Path to SSH private key (optional)
        port: SSH port (default: 22)

    Returns:
        Report of the backup, occurrence counts and exit code
    """
    args = EditBlockArgs(
        target=SSHTarget(
            host=host, user=user, private_key_path=privateKeyPath, port=port
        ),
        file_path=filePath,
        old_text=oldText,
        new_text=newText,
        expected_replacements=expectedReplacements,
    )
    return await _run_file_tool(args, always_show_exit_code=True)


async def read_lines(
    host: str,
    user: str,
    filePath: str,  # noqa: N803
    startLine: int = 1,  # noqa: N803
    endLine: int | None = None,  # noqa: N803
    maxLines: int = 100,  # noqa: N803
    privateKeyPath: str | None = None,  # noqa: N803
    port: int = DEFAULT_PORT,
) -> str:
    """Read a range of lines from a remote file.

    Args:
        host: Remote server hostname or IP address
        user: SSH username
        filePath: File to read
        startLine: First line to read, 1-based (default: 1)
        endLine: Last line to read, inclusive (optional)
        maxLines: Lines to read when endLine is not given (default: 100)
        privateKeyPath: Path to SSH private key (optional)
        port: SSH port (default: 22)

    Returns:
        Header with file name, total lines and range, then the lines
    """
    args = ReadLinesArgs(
        target=SSHTarget(
            host=host, user=user, private_key_path=privateKeyPath, port=port
        ),
        file_path=filePath,
        start_line=startLine,
        end_line=endLine,
        max_lines=maxLines,
    )
    return await _run_file_tool(args)


async def search_code(
    host: str,
    user: str,
    path: str,
    pattern: str,
    filePattern: str | None = None,  # noqa: N803
    ignoreCase: bool = False,  # noqa: N803
    maxResults: int = 50,  # noqa: N803
    contextLines: int = 2,  # noqa: N803
    privateKeyPath: str | None = None,  # noqa: N803
    port: int = DEFAULT_PORT,
) -> str:
    """Search files under a remote directory for an extended regex.

    Args:
        host: Remote server hostname or IP address
        user: SSH username
        path: Directory to search recursively
        pattern: Extended regular expression
        filePattern: File name glob, e.g. "*.py" (optional)
        ignoreCase: Case-insensitive search (default: false)
        maxResults: Maximum output lines (default: 50)
        contextLines: Context lines around each match (default: 2)
        privateKeyPath: Path to SSH private key (optional)
        port: SSH port (default: 22)

    Returns:
        Header with directory, pattern and filter, then file:line:text results
    """
    args = SearchCodeArgs(
        target=SSHTarget(
            host=host, user=user, private_key_path=privateKeyPath, port=port
        ),
        path=path,
        pattern=pattern,
        file_pattern=filePattern,
        ignore_case=ignoreCase,
        max_results=maxResults,
        context_lines=contextLines,
    )
    return await _run_file_tool(args)


async def write_chunk(
    host: str,
    user: str,
    filePath: str,  # noqa: N803
    content: str,
    mode: Literal["rewrite", "append"] = "rewrite",
    privateKeyPath: str | None = None,  # noqa: N803
    port: int = DEFAULT_PORT,
) -> str:
    """Write or append content to a remote file, creating parent directories.

    Content is written verbatim; no trailing newline is added.

    Args:
        host: Remote server hostname or IP address
        user: SSH username
        filePath: File to write
        content: Text to write
        mode: "rewrite" replaces the file, "append" adds to its end
        privateKeyPath: Path to SSH private key (optional)
        port: SSH port (default: 22)

    Returns:
        Report with path, mode, size in bytes and line count
    """
    args = WriteChunkArgs(
        target=SSHTarget(
            host=host, user=user, private_key_path=privateKeyPath, port=port
        ),
        file_path=filePath,
        content=content,
        mode=mode,
    )
    return await _run_file_tool(args)
