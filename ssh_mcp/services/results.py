"""Rendering of execution results into tool responses."""

import json
from typing import Any

from ssh_mcp.models import ExecutionResult, ToolName


def command_envelope(
    host: str,
    command: str,
    result: ExecutionResult | None = None,
    error: Exception | None = None,
) -> dict[str, Any]:
    """Build the remote-ssh response envelope.

    A successful execution yields ``success: true`` whatever the remote
    exit status; only a failure to run the command at all is
    ``success: false``.

    Args:
        host: Remote host
        command: Command as given by the caller
        result: Execution result, when the command ran
        error: Error raised instead of a result

    Returns:
        Dict with success, output, error, exitCode, host, command
    """
    if result is None:
        return {
            "success": False,
            "output": "",
            "error": str(error) if error is not None else "Unknown error",
            "exitCode": 1,
            "host": host,
            "command": command,
        }

    return {
        "success": True,
        "output": result.stdout,
        "error": result.stderr or None,
        "exitCode": result.exit_status or 0,
        "host": host,
        "command": command,
    }


def render_envelope(envelope: dict[str, Any]) -> str:
    """Serialize an envelope as indented JSON text."""
    return json.dumps(envelope, indent=2)


def script_report(result: ExecutionResult, always_show_exit_code: bool = False) -> str:
    """Render a synthesized script's output as the tool response body.

    Args:
        result: Execution result of the script
        always_show_exit_code: Append the exit code even when it is 0

    Returns:
        stdout, followed by stderr and the exit code when relevant
    """
    parts = []
    if result.stdout:
        parts.append(result.stdout)
    if result.stderr:
        parts.append(f"[stderr]\n{result.stderr}")

    exit_code = result.exit_status if result.exit_status is not None else -1
    if always_show_exit_code:
        parts.append(f"Exit code: {exit_code}")
    elif exit_code != 0:
        parts.append(f"[exit code: {exit_code}]")
    if result.exit_signal:
        parts.append(f"[signal: {result.exit_signal}]")

    return "\n".join(parts) if parts else "(no output)"


def tool_failure(tool: ToolName, error: Exception) -> str:
    """Single-line failure message for the file operation tools."""
    message = " ".join(str(error).split()) or type(error).__name__
    return f"Error: {tool} failed: {message}"
