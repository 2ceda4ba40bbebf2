"""Remote shell scripts for the file operation tools.

Each builder returns one self-contained POSIX shell script that checks
its precondition, does the work and prints a plain-text report, so a
single exec round trip is enough. Caller-supplied strings are embedded
only through the functions in ``ssh_mcp.utils.shell``.
"""

from enum import IntEnum

from ssh_mcp.models import (
    EditBlockArgs,
    FileToolArgs,
    ReadLinesArgs,
    SearchCodeArgs,
    WriteChunkArgs,
)
from ssh_mcp.utils.shell import (
    escape_sed_pattern,
    escape_sed_replacement,
    quote_content,
    quote_path,
)

# Prints the number of lines, counting a final line without newline
COUNT_LINES = "awk 'END { print NR }'"

# Counts non-overlapping occurrences of $NEEDLE across line breaks
COUNT_BLOCK = (
    "awk 'BEGIN { n = ENVIRON[\"NEEDLE\"] } { s = s $0 \"\\n\" } "
    "END { c = 0; while ((i = index(s, n)) > 0) { c++; s = substr(s, i + length(n)) } "
    "print c }'"
)


class ScriptExit(IntEnum):
    """Exit codes reported by the synthesized scripts."""

    OK = 0
    MISSING_TARGET = 1
    PATTERN_NOT_FOUND = 2


def _require_file(var: str) -> list[str]:
    return [
        f'if [ ! -f "${var}" ]; then',
        f'  echo "Error: File not found: ${var}"',
        f"  exit {ScriptExit.MISSING_TARGET:d}",
        "fi",
    ]


def _count_literal(text: str, var: str) -> str:
    """Shell expression counting non-overlapping literal occurrences.

    grep -F treats each line of a multi-line needle as its own pattern, so
    such text is counted by awk over the whole file instead.
    """
    if not text:
        return "0"
    if "\n" in text:
        return f'$(NEEDLE={quote_content(text)} {COUNT_BLOCK} "${var}")'
    return f'$(grep -oF -- {quote_content(text)} "${var}" | wc -l | tr -d \' \')'


def build_read_lines(args: ReadLinesArgs) -> str:
    """Script printing a header and lines ``[start, end]`` of a file.

    Without ``end_line`` the range is ``max_lines`` lines from
    ``start_line``. The end is clamped to the file length.
    """
    lines = [
        f"FILE={quote_path(args.file_path)}",
        f"START={args.start_line:d}",
        f"END={args.effective_end:d}",
        *_require_file("FILE"),
        f'TOTAL=$({COUNT_LINES} "$FILE")',
        'if [ "$END" -gt "$TOTAL" ]; then END=$TOTAL; fi',
        'echo "File: $FILE"',
        'echo "Total lines: $TOTAL"',
        'if [ "$START" -le "$END" ]; then',
        '  echo "Showing lines: $START-$END"',
        '  echo "---"',
        '  sed -n "${START},${END}p" "$FILE"',
        "else",
        '  echo "Showing lines: none (file has $TOTAL lines)"',
        '  echo "---"',
        "fi",
    ]
    return "\n".join(lines)


def build_edit_block(args: EditBlockArgs) -> str:
    """Script replacing every occurrence of ``old_text`` with ``new_text``.

    Counts occurrences first and exits with PATTERN_NOT_FOUND, leaving the
    file untouched, when there are none. Otherwise backs the file up,
    substitutes with sed and reports the counts.
    """
    expression = (
        f"s/{escape_sed_pattern(args.old_text)}"
        f"/{escape_sed_replacement(args.new_text)}/g"
    )
    expected = args.expected_replacements
    lines = [
        f"FILE={quote_path(args.file_path)}",
        *_require_file("FILE"),
        f"BEFORE={_count_literal(args.old_text, 'FILE')}",
        'if [ "$BEFORE" -eq 0 ]; then',
        '  echo "Warning: pattern not found in $FILE"',
        f"  exit {ScriptExit.PATTERN_NOT_FOUND:d}",
        "fi",
        f'if [ "$BEFORE" -ne {expected:d} ]; then',
        f'  echo "Warning: expected {expected:d} replacement(s) '
        f'but found $BEFORE occurrence(s)"',
        "fi",
        'BACKUP="$FILE.backup.$(date +%Y%m%d_%H%M%S)"',
        'cp -p "$FILE" "$BACKUP" || { echo "Error: Failed to create backup $BACKUP"; '
        f"exit {ScriptExit.MISSING_TARGET:d}; }}",
        'echo "Backup created: $BACKUP"',
        f'sed -i {quote_content(expression)} "$FILE" || '
        f'{{ echo "Error: Failed to edit $FILE"; exit {ScriptExit.MISSING_TARGET:d}; }}',
        f"AFTER={_count_literal(args.new_text, 'FILE')}",
        'echo "Occurrences before: $BEFORE"',
        'echo "Replacements made: $BEFORE"',
        'echo "Occurrences of new text after: $AFTER"',
    ]
    return "\n".join(lines)


def build_search_code(args: SearchCodeArgs) -> str:
    """Script running a recursive, line-numbered grep capped at max_results lines."""
    name_filter = (
        f" -name {quote_content(args.file_pattern)}" if args.file_pattern else ""
    )
    grep_flags = "-n -H -E"
    if args.ignore_case:
        grep_flags += " -i"
    if args.context_lines > 0:
        grep_flags += f" -C {args.context_lines:d}"

    lines = [
        f"DIR={quote_path(args.path)}",
        'if [ ! -d "$DIR" ]; then',
        '  echo "Error: Directory not found: $DIR"',
        f"  exit {ScriptExit.MISSING_TARGET:d}",
        "fi",
        'echo "Searching in: $DIR"',
        f"printf 'Pattern: %s\\n' {quote_content(args.pattern)}",
        f"printf 'File filter: %s\\n' {quote_content(args.file_pattern or '*')}",
        'echo "---"',
        f'RESULTS=$(find "$DIR" -type f{name_filter} '
        f"-exec grep {grep_flags} -- {quote_content(args.pattern)} {{}} + "
        f"2>/dev/null | head -n {args.max_results:d})",
        'if [ -z "$RESULTS" ]; then',
        '  echo "No matches found"',
        "else",
        "  printf '%s\\n' \"$RESULTS\"",
        "fi",
    ]
    return "\n".join(lines)


def build_write_chunk(args: WriteChunkArgs) -> str:
    """Script writing (or appending) content verbatim, then reporting size and lines."""
    redirect = ">>" if args.mode == "append" else ">"
    lines = [
        f"FILE={quote_path(args.file_path)}",
        'mkdir -p "$(dirname "$FILE")" || '
        '{ echo "Error: Failed to create parent directory for $FILE"; '
        f"exit {ScriptExit.MISSING_TARGET:d}; }}",
        f"if printf '%s' {quote_content(args.content)} {redirect} \"$FILE\"; then",
        "  SIZE=$(wc -c < \"$FILE\" | tr -d ' ')",
        f'  LINES=$({COUNT_LINES} "$FILE")',
        '  echo "Successfully wrote to $FILE"',
        f'  echo "Mode: {args.mode}"',
        '  echo "Size: $SIZE bytes"',
        '  echo "Lines: $LINES"',
        "else",
        '  echo "Error: Failed to write to $FILE"',
        f"  exit {ScriptExit.MISSING_TARGET:d}",
        "fi",
    ]
    return "\n".join(lines)


def build_script(args: FileToolArgs) -> str:
    """Build the script for any file operation tool."""
    if isinstance(args, ReadLinesArgs):
        return build_read_lines(args)
    if isinstance(args, EditBlockArgs):
        return build_edit_block(args)
    if isinstance(args, SearchCodeArgs):
        return build_search_code(args)
    if isinstance(args, WriteChunkArgs):
        return build_write_chunk(args)
    raise TypeError(f"No script for {type(args).__name__}")
