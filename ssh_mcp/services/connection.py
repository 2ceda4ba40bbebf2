"""One-shot SSH execution: connect, run one command, disconnect.

Every call opens its own session; nothing is pooled or shared between
calls and nothing is retried.
"""

import asyncio
import logging

import asyncssh

from ssh_mcp.config.constants import KEEPALIVE_INTERVAL, KEX_ALGORITHMS, READY_TIMEOUT
from ssh_mcp.models import ConnectionRequest, ExecutionResult

logger = logging.getLogger(__name__)


class ConnectionError(Exception):
    """Network, handshake or authentication failure; no command ran."""

    def __init__(self, host: str, original_error: Exception):
        """Initialize connection error.

        Args:
            host: Remote host name or address
            original_error: Exception that caused the failure
        """
        self.host = host
        self.original_error = original_error
        super().__init__(f"SSH connection failed: {_describe(original_error)}")


class ExecutionError(Exception):
    """The session was established but the command channel could not open."""

    def __init__(self, host: str, original_error: Exception):
        """Initialize execution error.

        Args:
            host: Remote host name or address
            original_error: Exception that caused the failure
        """
        self.host = host
        self.original_error = original_error
        super().__init__(f"Execution failed: {_describe(original_error)}")


def _describe(error: Exception) -> str:
    """Readable message for errors whose str() may be empty (timeouts)."""
    return str(error) or type(error).__name__


def _decode(data: str | bytes | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


async def _open_session(
    request: ConnectionRequest,
    private_key: bytes,
    known_hosts: str | None,
) -> asyncssh.SSHClientConnection:
    """Connect and authenticate with the given key only.

    Raises:
        ConnectionError: On any failure before the session is ready
    """
    try:
        client_key = asyncssh.import_private_key(private_key)
        return await asyncssh.connect(
            request.host,
            port=request.port,
            username=request.user,
            client_keys=[client_key],
            known_hosts=known_hosts,
            agent_path=None,
            password=None,
            preferred_auth="publickey",
            kex_algs=list(KEX_ALGORITHMS),
            connect_timeout=READY_TIMEOUT,
            keepalive_interval=KEEPALIVE_INTERVAL,
        )
    except (OSError, ValueError, asyncssh.Error, asyncio.TimeoutError) as e:
        # ValueError covers unreadable or encrypted key data
        logger.error("Cannot connect to %s: %s", request.endpoint, _describe(e))
        raise ConnectionError(request.host, e) from e


async def _close_session(
    conn: asyncssh.SSHClientConnection, request: ConnectionRequest
) -> None:
    """Close the session; a failed close never replaces the call's own outcome."""
    conn.close()
    try:
        await conn.wait_closed()
    except (OSError, asyncssh.Error) as e:
        logger.warning(
            "Error while closing SSH session to %s: %s", request.endpoint, _describe(e)
        )
        return
    logger.info("Closed SSH session to %s", request.endpoint)


async def execute_command(
    request: ConnectionRequest,
    private_key: bytes,
    known_hosts: str | None = None,
) -> ExecutionResult:
    """Run ``request.command`` on the remote host and collect its output.

    The command is passed verbatim to the remote user's login shell.
    stdout and stderr are collected into separate buffers until the
    channel closes, then trimmed of surrounding whitespace.

    Args:
        request: Host, user, port and command
        private_key: Raw private key (PEM or OpenSSH format)
        known_hosts: known_hosts path, or None to skip host key checks

    Returns:
        ExecutionResult with trimmed stdout/stderr and exit status

    Raises:
        ConnectionError: If the session could not be established
        ExecutionError: If the command channel could not be opened
    """
    logger.info("Opening SSH session to %s", request.endpoint)
    conn = await _open_session(request, private_key, known_hosts)

    try:
        logger.debug("Executing on %s: %s", request.endpoint, request.command)
        try:
            process = await asyncio.wait_for(
                conn.create_process(request.command, encoding=None),
                timeout=READY_TIMEOUT,
            )
        except (OSError, asyncssh.Error, asyncio.TimeoutError) as e:
            logger.error(
                "Cannot open command channel on %s: %s",
                request.endpoint,
                _describe(e),
            )
            raise ExecutionError(request.host, e) from e

        # Drains both streams concurrently until the channel closes
        stdout, stderr = await process.communicate()

        result = ExecutionResult(
            stdout=_decode(stdout).strip(),
            stderr=_decode(stderr).strip(),
            exit_status=process.exit_status,
            exit_signal=process.exit_signal[0] if process.exit_signal else None,
        )
    finally:
        await _close_session(conn, request)

    if result.exit_signal:
        logger.warning(
            "Command on %s killed by signal %s", request.endpoint, result.exit_signal
        )
    logger.debug(
        "Command on %s finished: exit_status=%s, stdout=%d chars, stderr=%d chars",
        request.endpoint,
        result.exit_status,
        len(result.stdout),
        len(result.stderr),
    )
    return result
