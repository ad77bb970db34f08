"""Tests for platform detection and command execution."""

import os
from pathlib import Path

import pytest

from wifi_stats.diagnostics.platform import (
    CommandExecutor,
    CommandResult,
    Platform,
    get_executor,
    get_platform,
)


class TestPlatform:
    """Tests for Platform enum."""

    def test_detect_returns_valid_platform(self):
        """Platform.detect() should return a valid Platform."""
        platform = Platform.detect()
        assert isinstance(platform, Platform)
        assert platform != Platform.UNKNOWN

    def test_is_unix_property(self):
        """is_unix should be True for macOS and Linux."""
        assert Platform.MACOS.is_unix is True
        assert Platform.LINUX.is_unix is True
        assert Platform.WINDOWS.is_unix is False


class TestCommandResult:
    """Tests for CommandResult error normalization."""

    def test_success_has_no_error(self):
        result = CommandResult(stdout="ok", stderr="warning", return_code=0)
        assert result.success
        assert result.error is None

    def test_failure_prefers_stderr(self):
        result = CommandResult(stdout="", stderr="cannot resolve host", return_code=68)
        assert not result.success
        assert result.error == "cannot resolve host"

    def test_failure_without_stderr_reports_status(self):
        result = CommandResult(stdout="partial", stderr="", return_code=2)
        assert result.error == "Command exited with status 2"

    def test_timeout_is_failure_even_with_zero_status(self):
        result = CommandResult(stdout="", stderr="", return_code=0, timed_out=True)
        assert not result.success


@pytest.mark.skipif(not Platform.detect().is_unix, reason="uses POSIX utilities")
class TestCommandExecutor:
    """Tests for CommandExecutor."""

    @pytest.mark.asyncio
    async def test_run_simple_command(self):
        """Should execute a simple command successfully."""
        executor = CommandExecutor()
        result = await executor.run(["echo", "hello"])

        assert result.success
        assert result.error is None
        assert "hello" in result.stdout.lower()

    @pytest.mark.asyncio
    async def test_arguments_are_not_shell_interpreted(self):
        executor = CommandExecutor()
        result = await executor.run(["echo", "$HOME;", "&&", "true"])

        assert result.stdout.strip() == "$HOME; && true"

    @pytest.mark.asyncio
    async def test_run_with_timeout(self):
        """Should handle timeout correctly."""
        executor = CommandExecutor(timeout=1)

        result = await executor.run(["sleep", "10"], timeout=1)

        assert result.timed_out
        assert not result.success
        assert "timed out" in result.error

    @pytest.mark.asyncio
    async def test_run_failing_command(self):
        """Should capture the exit status and stderr of failing commands."""
        executor = CommandExecutor()
        result = await executor.run(["sh", "-c", "echo partial; echo oops >&2; exit 3"])

        assert not result.success
        assert result.return_code == 3
        assert result.stdout.strip() == "partial"
        assert result.error == "oops"

    @pytest.mark.asyncio
    async def test_missing_binary_does_not_raise(self):
        executor = CommandExecutor()
        result = await executor.run(["wifi-stats-no-such-binary", "-I"])

        assert not result.success
        assert result.return_code == -1
        assert result.error

    @pytest.mark.asyncio
    async def test_run_in_working_directory(self, tmp_path: Path):
        executor = CommandExecutor()
        result = await executor.run(["pwd"], cwd=tmp_path)

        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    @pytest.mark.asyncio
    async def test_run_with_environment(self):
        executor = CommandExecutor()
        env = {"PATH": os.environ.get("PATH", "/usr/bin:/bin"), "WIFI_STATS_PROBE": "probe-env"}
        result = await executor.run(["sh", "-c", "echo $WIFI_STATS_PROBE"], env=env)

        assert result.stdout.strip() == "probe-env"


def test_get_platform():
    """get_platform() should return current platform."""
    platform = get_platform()
    assert isinstance(platform, Platform)
    assert platform == Platform.detect()


def test_get_executor_is_shared():
    assert get_executor() is get_executor()
