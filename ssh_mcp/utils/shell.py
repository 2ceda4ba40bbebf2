"""Escaping boundary for synthesized shell scripts.

Every caller-supplied string that ends up in a remote script goes through
exactly one of these functions, chosen by the role it plays there.
"""

import shlex

# Characters backslash-escaped on each side of ``s/pattern/replacement/``;
# the backslash comes first so later escapes are not doubled
SED_PATTERN_CHARS = "\\.*^$[]/"
SED_REPLACEMENT_CHARS = "\\&[]/"


def quote_path(path: str) -> str:
    """Quote a remote path for the shell.

    A leading ``~/`` is kept outside the quotes (as ``"$HOME"``) so the
    remote shell still expands it to the login user's home directory.

    Args:
        path: Remote file system path

    Returns:
        Shell-safe quoted path
    """
    if path == "~":
        return '"$HOME"'
    if path.startswith("~/"):
        return '"$HOME"/' + shlex.quote(path[2:])
    return shlex.quote(path)


def _escape_sed(text: str, chars: str) -> str:
    for char in chars:
        text = text.replace(char, "\\" + char)
    return text


def escape_sed_pattern(text: str) -> str:
    """Escape search text for the pattern side of ``s/.../.../``.

    Every basic-regex metacharacter is escaped so the text matches literally.
    """
    return _escape_sed(text, SED_PATTERN_CHARS)


def escape_sed_replacement(text: str) -> str:
    """Escape replacement text for the replacement side of ``s/.../.../``.

    ``&`` and backslashes are escaped so the text is inserted verbatim;
    newlines are backslash-escaped so GNU sed inserts them literally.
    """
    return _escape_sed(text, SED_REPLACEMENT_CHARS).replace("\n", "\\\n")


def quote_content(text: str) -> str:
    """Wrap text in a single-quoted shell literal.

    Embedded single quotes close the literal, add an escaped quote and
    reopen it: ``it's`` becomes ``'it'\\''s'``.
    """
    return "'" + text.replace("'", "'\\''") + "'"
