"""Fixed connection parameters shared by every tool."""

from pathlib import Path
from typing import Final

DEFAULT_PORT: Final[int] = 22

# Seconds allowed for TCP connect, handshake and authentication
READY_TIMEOUT: Final[float] = 20.0

# Seconds between keepalive probes on an open session
KEEPALIVE_INTERVAL: Final[float] = 30.0

KEX_ALGORITHMS: Final[tuple[str, ...]] = (
    "ecdh-sha2-nistp256",
    "ecdh-sha2-nistp384",
    "ecdh-sha2-nistp521",
    "diffie-hellman-group14-sha256",
)

# Environment variable holding a private key path
PRIVATE_KEY_ENV: Final[str] = "SSH_PRIVATE_KEY"

DEFAULT_KEY_PATHS: Final[tuple[Path, ...]] = (
    Path.home() / ".ssh" / "id_rsa",
    Path.home() / ".ssh" / "id_ed25519",
    Path.home() / ".ssh" / "id_ecdsa",
)
