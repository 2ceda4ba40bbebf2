"""remote-ssh tool: run an arbitrary command on a remote host."""

import logging

from ssh_mcp.config import DEFAULT_PORT
from ssh_mcp.models import RemoteCommandArgs, SSHTarget
from ssh_mcp.services import command_envelope, render_envelope
from ssh_mcp.tools.handlers import run_on_target
from ssh_mcp.utils.validation import validate_args

logger = logging.getLogger(__name__)


async def remote_ssh(
    host: str,
    user: str,
    command: str,
    privateKeyPath: str | None = None,  # noqa: N803
    port: int = DEFAULT_PORT,
) -> str:
    """Execute SSH commands on remote servers with private key authentication.

    Args:
        host: Remote server hostname or IP address
        user: SSH username
        command: Command to execute on remote server
        privateKeyPath: Path to SSH private key (optional, falls back to
            SSH_PRIVATE_KEY env var, then ~/.ssh/id_rsa, id_ed25519, id_ecdsa)
        port: SSH port (default: 22)

    Returns:
        JSON object with success, output, error, exitCode, host and command.
        Failures are reported with success=false instead of being raised.
    """
    try:
        args = validate_args(
            RemoteCommandArgs(
                target=SSHTarget(
                    host=host, user=user, private_key_path=privateKeyPath, port=port
                ),
                command=command,
            )
        )
        result = await run_on_target(args.target, args.command)
        envelope = command_envelope(host, command, result=result)
    except Exception as e:
        logger.warning("remote-ssh on %s failed: %s", host, e)
        envelope = command_envelope(host, command, error=e)

    return render_envelope(envelope)
