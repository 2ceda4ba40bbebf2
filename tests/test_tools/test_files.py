"""Tests for the file operation tools."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import pytest

from ssh_mcp.models import ExecutionResult, SSHTarget
from ssh_mcp.services import ConnectionError, KeyResolutionError
from ssh_mcp.tools.files import edit_block, read_lines, search_code, write_chunk


@pytest.fixture
def mock_run() -> Iterator[AsyncMock]:
    """Patch the shared execution path."""
    run = AsyncMock(return_value=ExecutionResult(stdout="ok", stderr="", exit_status=0))
    with patch("ssh_mcp.tools.files.run_on_target", run):
        yield run


class TestReadLines:
    """read-lines tool."""

    @pytest.mark.asyncio
    async def test_runs_script_on_target(self, mock_run: AsyncMock) -> None:
        """The synthesized script runs on the requested target."""
        mock_run.return_value = ExecutionResult(
            stdout="File: /f\nTotal lines: 3\nShowing lines: 1-3\n---\na\nb\nc",
            stderr="",
            exit_status=0,
        )

        text = await read_lines(host="web1", user="deploy", filePath="/f", port=2200)

        target, script = mock_run.call_args.args
        assert target == SSHTarget(host="web1", user="deploy", port=2200)
        assert "sed -n" in script
        assert text.endswith("---\na\nb\nc")

    @pytest.mark.asyncio
    async def test_missing_file_report(self, mock_run: AsyncMock) -> None:
        """The script's error and exit code are shown."""
        mock_run.return_value = ExecutionResult(
            stdout="Error: File not found: /nope", stderr="", exit_status=1
        )

        text = await read_lines(host="web1", user="deploy", filePath="/nope")

        assert text == "Error: File not found: /nope\n[exit code: 1]"

    @pytest.mark.asyncio
    async def test_end_before_start_rejected(self, mock_run: AsyncMock) -> None:
        """endLine below startLine fails validation without connecting."""
        text = await read_lines(
            host="web1", user="deploy", filePath="/f", startLine=10, endLine=5
        )

        assert text.startswith("Error: read-lines failed: endLine must be >= 10")
        mock_run.assert_not_called()

    @pytest.mark.asyncio
    async def test_zero_start_rejected(self, mock_run: AsyncMock) -> None:
        """startLine is 1-based."""
        text = await read_lines(host="web1", user="deploy", filePath="/f", startLine=0)

        assert "startLine must be >= 1" in text
        mock_run.assert_not_called()


class TestEditBlock:
    """edit-block tool."""

    @pytest.mark.asyncio
    async def test_always_reports_exit_code(self, mock_run: AsyncMock) -> None:
        """edit-block appends the exit code even on success."""
        mock_run.return_value = ExecutionResult(
            stdout="Backup created: /f.backup.20260101_120000\nReplacements made: 1",
            stderr="",
            exit_status=0,
        )

        text = await edit_block(
            host="web1", user="deploy", filePath="/f", oldText="a", newText="b"
        )

        assert text.endswith("Replacements made: 1\nExit code: 0")

    @pytest.mark.asyncio
    async def test_pattern_not_found(self, mock_run: AsyncMock) -> None:
        """Exit code 2 is reported for a missing pattern."""
        mock_run.return_value = ExecutionResult(
            stdout="Warning: pattern not found in /f", stderr="", exit_status=2
        )

        text = await edit_block(
            host="web1", user="deploy", filePath="/f", oldText="zzz", newText="b"
        )

        assert text == "Warning: pattern not found in /f\nExit code: 2"

    @pytest.mark.asyncio
    async def test_multiline_old_text_rejected(self, mock_run: AsyncMock) -> None:
        """oldText must be a single line."""
        text = await edit_block(
            host="web1", user="deploy", filePath="/f", oldText="a\nb", newText="c"
        )

        assert text == "Error: edit-block failed: oldText must be a single line"
        mock_run.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_old_text_rejected(self, mock_run: AsyncMock) -> None:
        """oldText is required."""
        text = await edit_block(
            host="web1", user="deploy", filePath="/f", oldText="", newText="c"
        )

        assert text == "Error: edit-block failed: Missing required parameter: oldText"
        mock_run.assert_not_called()


class TestSearchCode:
    """search-code tool."""

    @pytest.mark.asyncio
    async def test_passes_options_to_script(self, mock_run: AsyncMock) -> None:
        """Search options reach the synthesized script."""
        await search_code(
            host="web1",
            user="deploy",
            path="/srv/app",
            pattern="import os",
            filePattern="*.py",
            ignoreCase=True,
            maxResults=7,
            contextLines=0,
        )

        script = mock_run.call_args.args[1]
        assert "-name '*.py'" in script
        assert " -i " in script
        assert "head -n 7" in script

    @pytest.mark.asyncio
    async def test_negative_context_rejected(self, mock_run: AsyncMock) -> None:
        """contextLines cannot be negative."""
        text = await search_code(
            host="web1", user="deploy", path="/srv", pattern="x", contextLines=-1
        )

        assert "contextLines must be >= 0" in text
        mock_run.assert_not_called()


class TestWriteChunk:
    """write-chunk tool."""

    @pytest.mark.asyncio
    async def test_append_mode(self, mock_run: AsyncMock) -> None:
        """Append mode redirects with >>."""
        await write_chunk(
            host="web1", user="deploy", filePath="/f", content="B", mode="append"
        )

        assert ">> \"$FILE\"" in mock_run.call_args.args[1]

    @pytest.mark.asyncio
    async def test_empty_content_allowed(self, mock_run: AsyncMock) -> None:
        """Empty content truncates the file."""
        text = await write_chunk(host="web1", user="deploy", filePath="/f", content="")

        assert text == "ok"
        mock_run.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_mode_rejected(self, mock_run: AsyncMock) -> None:
        """Only rewrite and append are accepted."""
        text = await write_chunk(
            host="web1",
            user="deploy",
            filePath="/f",
            content="x",
            mode="prepend",  # type: ignore[arg-type]
        )

        assert text.startswith("Error: write-chunk failed: mode must be one of")
        mock_run.assert_not_called()


class TestFailures:
    """Execution failures become one error line."""

    @pytest.mark.asyncio
    async def test_connection_error(self, mock_run: AsyncMock) -> None:
        """Connection failures are reported, not raised."""
        mock_run.side_effect = ConnectionError("web1", TimeoutError())

        text = await read_lines(host="web1", user="deploy", filePath="/f")

        assert text == "Error: read-lines failed: SSH connection failed: TimeoutError"

    @pytest.mark.asyncio
    async def test_key_error(self, mock_run: AsyncMock) -> None:
        """Key resolution failures name the tried paths."""
        mock_run.side_effect = KeyResolutionError(["/k/id_rsa"])

        text = await write_chunk(host="web1", user="deploy", filePath="/f", content="x")

        assert text.startswith("Error: write-chunk failed: Private key error:")
        assert "/k/id_rsa" in text
        assert "\n" not in text
