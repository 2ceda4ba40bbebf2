"""Private key resolution."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ssh_mcp.config.constants import DEFAULT_KEY_PATHS, PRIVATE_KEY_ENV

logger = logging.getLogger(__name__)


class KeyResolutionError(Exception):
    """No readable private key among the attempted paths."""

    def __init__(self, paths: Sequence[Path]):
        """Initialize key resolution error.

        Args:
            paths: Every path that was tried, in order
        """
        self.paths = list(paths)
        tried = ", ".join(str(p) for p in self.paths)
        super().__init__(
            f"Private key error: No private key found. Tried: {tried}. "
            f"Provide privateKeyPath or set the {PRIVATE_KEY_ENV} environment variable"
        )


def explicit_key_path(private_key_path: str | None) -> str | None:
    """Pick the explicit key path: the argument, else the environment fallback."""
    if private_key_path:
        return private_key_path
    return os.getenv(PRIVATE_KEY_ENV) or None


def key_candidates(explicit_path: str | None) -> tuple[Path, ...]:
    """Return the ordered paths to try.

    An explicit path replaces the default list entirely.
    """
    if explicit_path:
        return (Path(os.path.expanduser(explicit_path)),)
    return DEFAULT_KEY_PATHS


def _read_key(path: Path) -> bytes | None:
    """Read one key file, returning None if it cannot be read."""
    try:
        return path.read_bytes()
    except OSError as e:
        logger.debug("Key candidate %s unreadable: %s", path, e)
        return None


def resolve_private_key(explicit_path: str | None = None) -> bytes:
    """Read the first readable key among the candidates.

    The key format is not checked here; a malformed key fails later,
    during authentication.

    Args:
        explicit_path: Key path supplied by the caller (or environment)

    Returns:
        Raw key file contents

    Raises:
        KeyResolutionError: If no candidate could be read
    """
    candidates = key_candidates(explicit_path)

    for path in candidates:
        key = _read_key(path)
        if key is None:
            continue
        logger.debug("Using private key %s", path)
        return key

    logger.error("No private key found among %d candidate(s)", len(candidates))
    raise KeyResolutionError(candidates)
