"""Platform detection and external command execution."""

import asyncio
import os
import platform
from dataclasses import dataclass
from enum import Enum


class Platform(Enum):
    """Supported operating systems."""

    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    UNKNOWN = "unknown"

    @classmethod
    def detect(cls) -> "Platform":
        """Detect the current operating system."""
        system = platform.system().lower()
        if system == "darwin":
            return cls.MACOS
        elif system == "windows":
            return cls.WINDOWS
        elif system == "linux":
            return cls.LINUX
        return cls.UNKNOWN

    @property
    def is_unix(self) -> bool:
        """Check if platform is Unix-like."""
        return self in (Platform.MACOS, Platform.LINUX)


@dataclass(frozen=True)
class CommandResult:
    """Result of executing a system command."""

    stdout: str
    stderr: str
    return_code: int
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.return_code == 0 and not self.timed_out

    @property
    def error(self) -> str | None:
        """Error text for a failed command, None on success."""
        if self.success:
            return None
        return self.stderr or f"Command exited with status {self.return_code}"


class CommandExecutor:
    """Execute external commands asynchronously with timeout support.

    Failures never propagate as exceptions: a non-zero exit, a binary that
    cannot be spawned and a timeout all come back as a CommandResult.
    """

    def __init__(self, timeout: float = 10):
        """Initialize executor with default timeout."""
        self.timeout = timeout
        self.platform = Platform.detect()

    async def run(
        self,
        command: list[str],
        timeout: float | None = None,
        cwd: str | os.PathLike[str] | None = None,
        env: dict[str, str] | None = None,
    ) -> CommandResult:
        """
        Execute a command to completion.

        Args:
            command: Program followed by its arguments
            timeout: Override default timeout (seconds)
            cwd: Working directory for the process
            env: Environment for the process (inherits ours if None)

        Returns:
            CommandResult with stdout, stderr, return code
        """
        timeout = timeout or self.timeout

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=env,
            )
        except OSError as e:
            # Missing binary, permission denied, bad cwd
            return CommandResult(stdout="", stderr=str(e), return_code=-1)

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()

            return CommandResult(
                stdout="",
                stderr=f"Command timed out after {timeout} seconds",
                return_code=-1,
                timed_out=True,
            )

        encoding = "utf-8" if self.platform.is_unix else "cp1252"
        return CommandResult(
            stdout=stdout.decode(encoding, errors="replace"),
            stderr=stderr.decode(encoding, errors="replace").strip(),
            return_code=process.returncode or 0,
        )


# Global executor instance
_executor: CommandExecutor | None = None


def get_executor(timeout: float = 10) -> CommandExecutor:
    """Get or create global command executor."""
    global _executor
    if _executor is None:
        _executor = CommandExecutor(timeout=timeout)
    return _executor


def get_platform() -> Platform:
    """Get the current platform."""
    return Platform.detect()
