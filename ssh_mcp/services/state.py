"""Process-wide settings for SSH MCP."""

from ssh_mcp.config import Settings

# Initialized on first access
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or load settings from the environment."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance.

    Allows tests to inject settings without touching the environment.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def reset_state() -> None:
    """Reset global state for testing.

    The next get_settings() call reloads from the environment.
    """
    global _settings
    _settings = None
