"""Config result container for toolcheck."""

from typing import Optional

from .types import ExecutableSpec


class ConfigResult:
    """Class to hold the effective executable spec and probe timeout."""

    def __init__(self, executable: ExecutableSpec, probe_timeout: Optional[float]):
        self.executable = executable
        self.probe_timeout = probe_timeout

    def __eq__(self, other):
        if isinstance(other, ConfigResult):
            return (
                self.executable == other.executable
                and self.probe_timeout == other.probe_timeout
            )
        return NotImplemented

    def __repr__(self):
        return (
            f"ConfigResult(executable={self.executable!r}, "
            f"probe_timeout={self.probe_timeout!r})"
        )
