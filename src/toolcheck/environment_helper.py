"""Environment variable operations for toolcheck."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")

EXECUTABLE_ENV_VAR = "TOOLCHECK_BUILDIFIER_EXECUTABLE"
TIMEOUT_ENV_VAR = "TOOLCHECK_PROBE_TIMEOUT"
DEBUG_ENV_VAR = "TOOLCHECK_DEBUG"


def debug_log(message: str) -> None:
    """Log debug message when TOOLCHECK_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug tracing is enabled."""
        return os.environ.get(DEBUG_ENV_VAR, "").lower() in TRUTHY_VALUES

    @staticmethod
    def is_windows() -> bool:
        """Determine if running on Windows."""
        return sys.platform.startswith("win")

    @staticmethod
    def default_executable_name() -> str:
        """Get the platform-appropriate default buildifier executable name."""
        if EnvironmentHelper.is_windows():
            return "buildifier.exe"
        return "buildifier"

    @staticmethod
    def get_executable_override() -> str | None:
        """Get the executable spec from the environment, if set."""
        value = os.environ.get(EXECUTABLE_ENV_VAR, "").strip()
        return value or None

    @staticmethod
    def get_probe_timeout_override() -> str | None:
        """Get the raw probe timeout from the environment, if set."""
        value = os.environ.get(TIMEOUT_ENV_VAR, "").strip()
        return value or None
