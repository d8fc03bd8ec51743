"""Compatibility probing for toolcheck."""

import json
from typing import Optional

from .environment_helper import debug_log
from .exceptions import ProbeSpawnError, ProbeTimeoutError, UnresolvedExecutableError
from .locator import ResolvedExecutable
from .probe_result import ProbeResult
from .process_runner import AsyncProcessRunner, ProcessOutput, ProcessRunner

# Machine-readable output in check mode: buildifier reads an empty stdin and
# writes nothing back to disk.
PROBE_ARGS = ["--format=json", "--mode=check"]

DEFAULT_PROBE_TIMEOUT = 10.0


class CompatibilityProber:
    """Runs the probe invocation and classifies the result."""

    def __init__(
        self,
        process_runner: Optional[ProcessRunner] = None,
        timeout: Optional[float] = DEFAULT_PROBE_TIMEOUT,
    ):
        self.process_runner = process_runner or AsyncProcessRunner()
        self.timeout = timeout

    async def probe(self, executable: Optional[ResolvedExecutable]) -> ProbeResult:
        """
        Probe a resolved executable for compatibility.

        Args:
            executable: Output of Locator.resolve; None means not found

        Returns:
            ProbeResult classifying the executable

        Raises:
            UnresolvedExecutableError: If given anything other than a
                ResolvedExecutable or None
        """
        if executable is None:
            return ProbeResult.NOT_FOUND

        if not isinstance(executable, ResolvedExecutable):
            raise UnresolvedExecutableError(executable)

        try:
            output = await self.process_runner.run(
                executable.path, list(PROBE_ARGS), self.timeout
            )
        except (ProbeSpawnError, ProbeTimeoutError) as e:
            debug_log(f"probe: {e.message}")
            return ProbeResult.PROBE_FAILED

        return CompatibilityProber.classify(output)

    @staticmethod
    def classify(output: ProcessOutput) -> ProbeResult:
        """Classify a finished probe process."""
        if output.stderr:
            debug_log(f"classify: stderr: {output.stderr.strip()}")

        if not output.succeeded:
            debug_log(f"classify: probe exited with {output.exit_code}")
            return ProbeResult.INCOMPATIBLE_VERSION

        if not output.stdout.strip():
            debug_log("classify: probe produced no output")
            return ProbeResult.INCOMPATIBLE_VERSION

        if CompatibilityProber.is_structured_document(output.stdout):
            return ProbeResult.COMPATIBLE

        debug_log("classify: probe output is not a JSON object")
        return ProbeResult.INCOMPATIBLE_VERSION

    @staticmethod
    def is_structured_document(text: str) -> bool:
        """Check that text parses as a JSON object."""
        try:
            document = json.loads(text)
        except ValueError:
            return False
        return isinstance(document, dict)
