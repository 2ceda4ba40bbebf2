"""SSH MCP server: remote commands and file operations over one-shot SSH sessions."""

__version__ = "2.1.0"
