"""Path operations for toolcheck."""

import os
from pathlib import Path

from .environment_helper import EnvironmentHelper


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def get_config_path() -> Path | None:
        """Get the path to the config file."""
        # Check XDG_CONFIG_HOME first (standard location)
        if xdg_config_home := os.getenv("XDG_CONFIG_HOME"):
            config_path = Path(xdg_config_home) / "toolcheck.conf"
            if PathHelper._is_file(config_path):
                return config_path

        # Fall back to HOME/.config/toolcheck.conf
        home = os.getenv("HOME")
        if home:
            config_path = Path(home) / ".config" / "toolcheck.conf"
            if PathHelper._is_file(config_path):
                return config_path

        return None

    @staticmethod
    def is_executable_file(path: str | Path) -> bool:
        """Check if path is an existing regular file the current user may execute."""
        return PathHelper._is_file(Path(path)) and os.access(path, os.X_OK)

    @staticmethod
    def has_directory_component(name: str) -> bool:
        """Check if name contains a directory separator rather than being a bare command."""
        separators = {os.sep}
        if os.altsep:
            separators.add(os.altsep)
        return any(sep in name for sep in separators)

    @staticmethod
    def find_executable(name: str) -> str | None:
        """Find the first executable named `name` on PATH and return its absolute path."""
        path = os.environ.get("PATH", "")
        if not path:
            return None

        for path_dir in path.split(os.pathsep):
            if PathHelper._is_valid_path_directory(path_dir):
                match = PathHelper._find_executable_in_directory(name, path_dir)
                if match:
                    return match
        return None

    @staticmethod
    def _is_valid_path_directory(path_dir: str) -> bool:
        """Check if path directory is valid."""
        if not path_dir:
            return False
        try:
            return Path(path_dir).is_dir()
        except OSError:
            # Unreadable parent directories raise instead of reporting False.
            return False

    @staticmethod
    def _is_file(path: Path) -> bool:
        """Check if path is a regular file, treating unreachable paths as absent."""
        try:
            return path.is_file()
        except OSError:
            return False

    @staticmethod
    def _candidate_names(name: str) -> list[str]:
        """Get the file names to try for `name`, honouring PATHEXT on Windows."""
        if not EnvironmentHelper.is_windows():
            return [name]

        extensions = os.environ.get("PATHEXT", ".COM;.EXE;.BAT;.CMD").split(os.pathsep)
        if any(name.lower().endswith(ext.lower()) for ext in extensions if ext):
            return [name]
        return [name] + [name + ext for ext in extensions if ext]

    @staticmethod
    def _find_executable_in_directory(name: str, path_dir: str) -> str | None:
        """Return the absolute path of `name` in directory if it is executable."""
        for candidate in PathHelper._candidate_names(name):
            executable_path = Path(path_dir) / candidate
            if PathHelper.is_executable_file(executable_path):
                return str(executable_path.absolute())
        return None
