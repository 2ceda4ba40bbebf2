"""Shared execution path for all tools."""

import logging

from ssh_mcp.models import ConnectionRequest, ExecutionResult, SSHTarget
from ssh_mcp.services import (
    execute_command,
    explicit_key_path,
    get_settings,
    resolve_private_key,
)

logger = logging.getLogger(__name__)


async def run_on_target(target: SSHTarget, command: str) -> ExecutionResult:
    """Resolve a key and run one command on the target host.

    Key resolution order: ``target.private_key_path``, then the
    SSH_PRIVATE_KEY environment variable, then the default key files.

    Args:
        target: Host, user, port and optional key path
        command: Command or synthesized script to run

    Returns:
        ExecutionResult of the single execution

    Raises:
        KeyResolutionError: If no key could be read
        ConnectionError: If the session could not be established
        ExecutionError: If the command channel could not be opened
    """
    key_path = explicit_key_path(target.private_key_path)
    private_key = resolve_private_key(key_path)

    request = ConnectionRequest(
        host=target.host,
        user=target.user,
        command=command,
        port=target.port,
        key_path=key_path,
    )
    return await execute_command(
        request,
        private_key,
        known_hosts=get_settings().known_hosts,
    )
