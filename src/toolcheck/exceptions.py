"""Custom exceptions for toolcheck."""


class ToolcheckError(Exception):
    """Base exception for toolcheck errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidExecutableSpecError(ToolcheckError):
    """Raised when the configured executable spec is empty."""

    def __init__(self, spec: str | None = None):
        super().__init__(f"Invalid executable spec: {spec!r}")
        self.spec = spec


class UnresolvedExecutableError(ToolcheckError):
    """Raised when a probe is requested for an executable that was never resolved."""

    def __init__(self, value: object):
        super().__init__(
            f"Expected a resolved executable or None, got {type(value).__name__}"
        )
        self.value = value


class ProbeSpawnError(ToolcheckError):
    """Raised when the probe process cannot be started."""

    def __init__(self, executable: str, reason: str = ""):
        message = f"Failed to start '{executable}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.executable = executable
        self.reason = reason


class ProbeTimeoutError(ToolcheckError):
    """Raised when the probe process does not exit within the allowed time."""

    def __init__(self, executable: str, timeout: float):
        super().__init__(f"'{executable}' did not exit within {timeout:g} seconds")
        self.executable = executable
        self.timeout = timeout


class InvalidConfigError(ToolcheckError):
    """Raised when config file has invalid format or content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid config format",
    ):
        full_message = f"Invalid config in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num
