"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Server settings from environment.

    Connection parameters (timeouts, key exchange, default key paths)
    are fixed constants and deliberately not configurable here.
    """

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    # Host key verification (None disables it)
    known_hosts: str | None = field(default=None)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from SSH_MCP_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            transport=cls._get_transport(),
            http_host=os.getenv("SSH_MCP_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("SSH_MCP_HTTP_PORT", 8000),
            log_level=os.getenv("SSH_MCP_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("SSH_MCP_LOG_COLORS", True),
            log_payloads=cls._get_bool("SSH_MCP_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SSH_MCP_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("SSH_MCP_INCLUDE_TRACEBACK", False),
            known_hosts=cls._get_known_hosts(),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport ("stdio" or "http"), defaulting to stdio."""
        transport = os.getenv("SSH_MCP_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        if transport:
            logger.warning("Unknown SSH_MCP_TRANSPORT %r, using stdio", transport)
        return "stdio"

    @staticmethod
    def _get_known_hosts() -> str | None:
        """Get known_hosts path, or None when verification is disabled.

        Raises:
            FileNotFoundError: If SSH_MCP_KNOWN_HOSTS names a missing file
        """
        value = os.getenv("SSH_MCP_KNOWN_HOSTS", "").strip()
        if not value or value.lower() == "none":
            return None

        path = Path(os.path.expanduser(value))
        if not path.exists():
            raise FileNotFoundError(
                f"SSH_MCP_KNOWN_HOSTS points to a missing file: {path}\n"
                f"Add host keys with: ssh-keyscan <hostname> >> {path}"
            )
        return str(path)
