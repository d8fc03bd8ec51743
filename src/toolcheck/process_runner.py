"""Process spawning for toolcheck probes."""

import asyncio
from typing import Optional, Protocol

from .environment_helper import debug_log
from .exceptions import ProbeSpawnError, ProbeTimeoutError
from .types import ArgsList, ExitCode


class ProcessOutput:
    """Exit status and captured streams of a finished child process."""

    def __init__(self, exit_code: ExitCode, stdout: str = "", stderr: str = ""):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def __eq__(self, other):
        if isinstance(other, ProcessOutput):
            return (self.exit_code, self.stdout, self.stderr) == (
                other.exit_code,
                other.stdout,
                other.stderr,
            )
        return NotImplemented

    def __repr__(self):
        return (
            f"ProcessOutput(exit_code={self.exit_code!r}, "
            f"stdout={self.stdout!r}, stderr={self.stderr!r})"
        )


class ProcessRunner(Protocol):
    """Spawn an executable with no stdin payload and collect its output."""

    async def run(
        self, executable: str, args: ArgsList, timeout: Optional[float] = None
    ) -> ProcessOutput:
        """
        Run `executable` with `args` to completion.

        Raises:
            ProbeSpawnError: If the process cannot be started
            ProbeTimeoutError: If the process does not exit within `timeout`
        """
        ...


class AsyncProcessRunner:
    """Runs child processes with asyncio, closing stdin immediately."""

    async def run(
        self, executable: str, args: ArgsList, timeout: Optional[float] = None
    ) -> ProcessOutput:
        """Execute command and wait for it, returning exit code and decoded output."""
        debug_log(f"run: spawning {executable} {' '.join(args)}")

        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ProbeSpawnError(executable, e.strerror or str(e)) from e

        # An empty payload makes communicate() close stdin right away.
        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(input=b""), timeout=timeout or None
            )
        except asyncio.TimeoutError as e:
            await AsyncProcessRunner._kill(process)
            raise ProbeTimeoutError(executable, timeout or 0) from e
        except asyncio.CancelledError:
            await AsyncProcessRunner._kill(process)
            raise
        except (BrokenPipeError, ConnectionResetError) as e:
            await AsyncProcessRunner._kill(process)
            raise ProbeSpawnError(executable, str(e)) from e

        exit_code = process.returncode if process.returncode is not None else -1
        debug_log(f"run: {executable} exited with {exit_code}")

        return ProcessOutput(
            exit_code,
            AsyncProcessRunner._decode(stdout),
            AsyncProcessRunner._decode(stderr),
        )

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        """Kill a still-running child and reap it."""
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        await process.wait()

    @staticmethod
    def _decode(data: Optional[bytes]) -> str:
        """Decode captured output, replacing undecodable bytes."""
        if not data:
            return ""
        return data.decode("utf-8", errors="replace")
