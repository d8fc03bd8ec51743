"""Configuration management functionality for toolcheck."""

import logging
import math
import re
from pathlib import Path
from typing import Optional

from .config_result import ConfigResult
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import InvalidConfigError
from .path_helper import PathHelper
from .prober import DEFAULT_PROBE_TIMEOUT
from .types import SettingsData

EXECUTABLE_KEY = "buildifier_executable"
TIMEOUT_KEY = "probe_timeout"

MAX_CONFIG_SIZE = 1024 * 1024
MAX_LINE_LENGTH = 10000


class ConfigManager:
    """Manages configuration file loading and settings precedence."""

    @staticmethod
    def find_config_file() -> Path | None:
        """Find toolcheck.conf config file path."""
        return PathHelper.get_config_path()

    @staticmethod
    def load_config(config_file: Path) -> SettingsData:
        """
        Load raw key/value settings from file.

        Args:
            config_file: Path to the configuration file

        Returns:
            Dictionary of setting names to values

        Raises:
            InvalidConfigError: If config file has invalid format or content
        """
        settings: SettingsData = {}

        file_size = config_file.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise InvalidConfigError(
                str(config_file), message=f"Config file too large ({file_size} bytes)"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    ConfigManager._process_config_line(
                        line, line_num, str(config_file), settings
                    )
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e

        return settings

    @staticmethod
    def load_settings(
        executable: Optional[str] = None, config_file: Path | None = None
    ) -> ConfigResult:
        """
        Resolve the effective settings.

        Precedence: explicit argument, environment, config file, default.
        Config problems are logged and the defaults are used instead.
        """
        raw: SettingsData = {}
        config_file = config_file or ConfigManager.find_config_file()
        if config_file:
            try:
                raw = ConfigManager.load_config(config_file)
            except (InvalidConfigError, OSError) as e:
                logging.error(str(e))
                raw = {}

        spec = (
            executable
            or EnvironmentHelper.get_executable_override()
            or raw.get(EXECUTABLE_KEY)
            or EnvironmentHelper.default_executable_name()
        )

        timeout = DEFAULT_PROBE_TIMEOUT
        timeout_value = EnvironmentHelper.get_probe_timeout_override() or raw.get(
            TIMEOUT_KEY
        )
        if timeout_value is not None:
            try:
                timeout = ConfigManager.parse_timeout(timeout_value)
            except InvalidConfigError as e:
                logging.error(str(e))

        debug_log(f"load_settings: executable={spec!r}, probe_timeout={timeout!r}")
        return ConfigResult(spec, timeout)

    @staticmethod
    def parse_timeout(value: str) -> Optional[float]:
        """Parse a timeout in seconds; 0 disables the timeout."""
        try:
            timeout = float(value)
        except ValueError as e:
            raise InvalidConfigError(
                TIMEOUT_KEY, message=f"Invalid timeout: '{value}'"
            ) from e

        if timeout < 0 or not math.isfinite(timeout):
            raise InvalidConfigError(TIMEOUT_KEY, message=f"Invalid timeout: '{value}'")
        return timeout or None

    @staticmethod
    def _process_config_line(
        line: str, line_num: int, config_file: str, settings: SettingsData
    ) -> None:
        """Process a single configuration line."""
        # Skip empty lines and comments
        if not line.strip() or line.lstrip().startswith("#"):
            return

        if len(line) > MAX_LINE_LENGTH:
            raise InvalidConfigError(
                config_file,
                line_num,
                f"Line too long ({len(line)} characters)",
            )

        # Handle lines without equals signs gracefully
        if "=" not in line:
            return

        key, value = line.strip().split("=", 1)
        key = ConfigManager._strip_quotes(key.strip()).strip()

        if not ConfigManager._is_valid_key(key):
            raise InvalidConfigError(
                config_file, line_num, f"Invalid setting name: '{key}'"
            )

        settings[key] = ConfigManager._strip_quotes(value.strip())

    @staticmethod
    def _is_valid_key(name: str) -> bool:
        """Validate setting name: letters, digits and underscores, not starting with a digit."""
        return bool(re.match(r"^[a-zA-Z_][a-zA-Z0-9_]*$", name))

    @staticmethod
    def _strip_quotes(value: str) -> str:
        """Strip quotes from value if present."""
        if ConfigManager._is_quoted(value):
            return value[1:-1]
        return value

    @staticmethod
    def _is_quoted(value: str) -> bool:
        """Check if value is quoted with matching quotes."""
        return len(value) >= 2 and (
            (value.startswith('"') and value.endswith('"'))
            or (value.startswith("'") and value.endswith("'"))
        )
