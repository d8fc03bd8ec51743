"""
Type aliases for toolcheck.

This module provides centralized type definitions shared by the locator,
the prober and the orchestration layer.

Type Aliases:
    ExecutableSpec: Configured executable name or path
    ArgsList: List of string arguments
    ExitCode: Integer representing process exit codes
    SearchPath: Callable that resolves a bare name on the search path
    UrlOpener: Callable that opens a URL for the user
    SettingsData: Dictionary representing raw configuration values
"""

from typing import Callable, Dict, List, Optional

ExecutableSpec = str
"""Configured executable identifier: a bare command name or a filesystem path."""

ArgsList = List[str]
"""List of string arguments passed to the spawned executable."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

SearchPath = Callable[[str], Optional[str]]
"""Resolve a bare executable name to an absolute path, or None when absent."""

UrlOpener = Callable[[str], object]
"""Open a URL for the user (e.g. in a browser)."""

SettingsData = Dict[str, str]
"""Dictionary of raw configuration keys and values read from the config file."""
