import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


posix_only = pytest.mark.skipif(
    sys.platform.startswith("win"), reason="shell script stubs require a POSIX shell"
)


class StubProcessRunner:
    """In-memory ProcessRunner that records every spawn request."""

    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.calls = []

    async def run(self, executable, args, timeout=None):
        self.calls.append((executable, list(args), timeout))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep real user config and TOOLCHECK_* variables out of every test."""
    for var in (
        "TOOLCHECK_DEBUG",
        "TOOLCHECK_BUILDIFIER_EXECUTABLE",
        "TOOLCHECK_PROBE_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def stub_runner():
    """
    Fixture for building in-memory process runners.

    Usage:
        def test_probe(stub_runner):
            runner = stub_runner(ProcessOutput(0, '{"success": true}'))
            ...
            assert len(runner.calls) == 1
    """

    def _create(output=None, error=None):
        return StubProcessRunner(output=output, error=error)

    return _create


@pytest.fixture
def make_script(tmp_path):
    """
    Fixture for writing executable shell stubs.

    Usage:
        def test_real_process(make_script):
            path = make_script("fake", 'echo "{}"')
    """

    def _create(name, body, mode=0o755, directory=None):
        directory = directory or tmp_path / "bin"
        directory.mkdir(parents=True, exist_ok=True)
        script = directory / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(mode)
        return script

    return _create


@pytest.fixture
def temp_config_file(tmp_path):
    """Fixture for a config file location inside XDG_CONFIG_HOME."""
    config_dir = tmp_path / "xdg"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "toolcheck.conf"


@pytest.fixture
def temp_config_with_content(temp_config_file):
    """Fixture for temporary config files with various content types."""

    def _create_config(content):
        temp_config_file.write_text(content, encoding="utf-8")
        return temp_config_file

    return _create_config


requires_non_root = pytest.mark.skipif(
    sys.platform.startswith("win") or os.geteuid() == 0,
    reason="directory permission bits are not enforced for root",
)


@pytest.fixture
def locked_directory(tmp_path, make_script):
    """
    Fixture for a directory holding an executable `buildifier` that the
    current user cannot traverse (mode 000).

    Usage:
        def test_locked(locked_directory):
            spec = str(locked_directory / "buildifier")
    """
    locked = tmp_path / "locked"
    make_script("buildifier", "exit 0", directory=locked)
    locked.chmod(0o000)
    yield locked
    locked.chmod(0o755)
