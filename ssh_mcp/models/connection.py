"""Connection and execution data models."""

from dataclasses import dataclass

from ssh_mcp.config.constants import DEFAULT_PORT


@dataclass(frozen=True)
class ConnectionRequest:
    """One remote command execution against one host.

    Built fresh for every tool call and never reused.
    """

    host: str
    user: str
    command: str
    port: int = DEFAULT_PORT
    key_path: str | None = None

    @property
    def endpoint(self) -> str:
        """Return user@host:port for logging."""
        return f"{self.user}@{self.host}:{self.port}"


@dataclass(frozen=True)
class ExecutionResult:
    """Result of a remote command execution."""

    stdout: str
    stderr: str
    exit_status: int | None
    exit_signal: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the remote command exited with status 0."""
        return self.exit_status == 0
