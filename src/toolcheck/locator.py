"""Executable resolution for toolcheck."""

from pathlib import Path
from typing import Optional

from .environment_helper import debug_log
from .exceptions import InvalidExecutableSpecError
from .path_helper import PathHelper
from .types import ExecutableSpec, SearchPath


class ResolvedExecutable:
    """An absolute path that was verified to be an invocable file."""

    __slots__ = ("_path",)

    def __init__(self, path: str):
        self._path = str(Path(path).absolute())

    @property
    def path(self) -> str:
        return self._path

    def __eq__(self, other):
        if isinstance(other, ResolvedExecutable):
            return self._path == other._path
        return NotImplemented

    def __hash__(self):
        return hash(self._path)

    def __repr__(self):
        return f"ResolvedExecutable({self._path!r})"

    def __str__(self):
        return self._path


class Locator:
    """Resolves a configured executable spec to a concrete path."""

    def __init__(self, search_path: Optional[SearchPath] = None):
        self.search_path = search_path or PathHelper.find_executable

    def resolve(self, spec: ExecutableSpec) -> Optional[ResolvedExecutable]:
        """
        Resolve `spec` to an executable.

        A spec containing a directory component is used as a path and
        returned if it names an executable file. A bare command name is only
        looked up on the search path, never in the working directory.

        Returns:
            ResolvedExecutable for the first match, or None when nothing
            invocable matches.

        Raises:
            InvalidExecutableSpecError: If spec is empty
        """
        if not spec or not spec.strip():
            raise InvalidExecutableSpecError(spec)

        if PathHelper.has_directory_component(spec):
            if PathHelper.is_executable_file(spec):
                debug_log(f"resolve: {spec!r} is an executable file")
                return ResolvedExecutable(spec)
            debug_log(f"resolve: {spec!r} is a path but not an executable file")
            return None

        match = self.search_path(spec)
        if not match:
            debug_log(f"resolve: {spec!r} not found on search path")
            return None

        debug_log(f"resolve: {spec!r} resolved to {match}")
        return ResolvedExecutable(match)
