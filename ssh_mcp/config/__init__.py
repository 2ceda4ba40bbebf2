"""Configuration module for SSH MCP.

- Settings: environment variable configuration
- constants: fixed connection parameters and default key paths
"""

from ssh_mcp.config.constants import (
    DEFAULT_KEY_PATHS,
    DEFAULT_PORT,
    KEEPALIVE_INTERVAL,
    KEX_ALGORITHMS,
    PRIVATE_KEY_ENV,
    READY_TIMEOUT,
)
from ssh_mcp.config.settings import Settings

__all__ = [
    "DEFAULT_KEY_PATHS",
    "DEFAULT_PORT",
    "KEEPALIVE_INTERVAL",
    "KEX_ALGORITHMS",
    "PRIVATE_KEY_ENV",
    "READY_TIMEOUT",
    "Settings",
]
