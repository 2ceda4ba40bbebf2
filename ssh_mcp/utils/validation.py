"""Tool argument validation.

All checks run before any key lookup or network activity.
"""

from ssh_mcp.models import (
    EditBlockArgs,
    ReadLinesArgs,
    RemoteCommandArgs,
    SearchCodeArgs,
    SSHTarget,
    ToolArgs,
    WriteChunkArgs,
)

WRITE_MODES = ("rewrite", "append")


class ValidationError(ValueError):
    """A tool argument is missing or out of range."""

    pass


def require(value: str | None, name: str) -> str:
    """Ensure a required string argument is present and non-empty.

    Raises:
        ValidationError: If value is None or empty
    """
    if value is None or value == "":
        raise ValidationError(f"Missing required parameter: {name}")
    return value


def validate_host(host: str) -> str:
    """Validate a host name or address.

    Raises:
        ValidationError: If host is empty, too long or contains whitespace
    """
    require(host, "host")

    if len(host) > 253:
        raise ValidationError(f"Host name too long: {len(host)} chars")

    if any(char.isspace() or char == "\x00" for char in host):
        raise ValidationError(f"Host contains invalid characters: {host!r}")

    return host


def validate_port(port: int) -> int:
    """Validate a TCP port number."""
    if isinstance(port, bool) or not 1 <= port <= 65535:
        raise ValidationError(f"Port must be between 1 and 65535, got {port}")
    return port


def validate_path(path: str, name: str = "filePath") -> str:
    """Validate a remote path.

    Raises:
        ValidationError: If path is empty or contains a null byte
    """
    require(path, name)

    # Null bytes truncate arguments on the remote side
    if "\x00" in path:
        raise ValidationError(f"{name} contains null byte: {path!r}")

    return path


def _at_least(value: int, minimum: int, name: str) -> int:
    if value < minimum:
        raise ValidationError(f"{name} must be >= {minimum}, got {value}")
    return value


def validate_target(target: SSHTarget) -> SSHTarget:
    """Validate the connection fields shared by every tool."""
    validate_host(target.host)
    require(target.user, "user")
    validate_port(target.port)
    if target.private_key_path is not None:
        validate_path(target.private_key_path, "privateKeyPath")
    return target


def validate_args(args: ToolArgs) -> ToolArgs:
    """Validate the arguments of any tool.

    Args:
        args: Typed tool arguments

    Returns:
        The same arguments, unchanged

    Raises:
        ValidationError: On the first invalid argument
    """
    validate_target(args.target)

    if isinstance(args, RemoteCommandArgs):
        require(args.command, "command")
    elif isinstance(args, EditBlockArgs):
        validate_path(args.file_path)
        require(args.old_text, "oldText")
        if "\n" in args.old_text:
            raise ValidationError("oldText must be a single line")
        if args.new_text is None:
            raise ValidationError("Missing required parameter: newText")
        _at_least(args.expected_replacements, 1, "expectedReplacements")
    elif isinstance(args, ReadLinesArgs):
        validate_path(args.file_path)
        _at_least(args.start_line, 1, "startLine")
        _at_least(args.max_lines, 1, "maxLines")
        if args.end_line is not None:
            _at_least(args.end_line, args.start_line, "endLine")
    elif isinstance(args, SearchCodeArgs):
        validate_path(args.path, "path")
        require(args.pattern, "pattern")
        _at_least(args.max_results, 1, "maxResults")
        _at_least(args.context_lines, 0, "contextLines")
    elif isinstance(args, WriteChunkArgs):
        validate_path(args.file_path)
        if args.content is None:
            raise ValidationError("Missing required parameter: content")
        if args.mode not in WRITE_MODES:
            raise ValidationError(
                f"mode must be one of {', '.join(WRITE_MODES)}, got {args.mode!r}"
            )
    else:
        raise TypeError(f"Unsupported tool arguments: {type(args).__name__}")

    return args
