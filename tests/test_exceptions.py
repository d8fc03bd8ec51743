"""Tests for the exception classes in toolcheck."""

import pytest

from toolcheck.exceptions import (
    InvalidConfigError,
    InvalidExecutableSpecError,
    ProbeSpawnError,
    ProbeTimeoutError,
    ToolcheckError,
    UnresolvedExecutableError,
)


class TestExceptionsUnit:
    """Unit tests for the exception classes."""

    def test_toolcheck_error_message(self):
        error = ToolcheckError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert isinstance(error, Exception)

    @pytest.mark.parametrize(
        "error",
        [
            InvalidExecutableSpecError(""),
            UnresolvedExecutableError("buildifier"),
            ProbeSpawnError("buildifier"),
            ProbeTimeoutError("buildifier", 1.0),
            InvalidConfigError("toolcheck.conf"),
        ],
    )
    def test_all_errors_share_base(self, error):
        assert isinstance(error, ToolcheckError)

    def test_invalid_executable_spec_error(self):
        error = InvalidExecutableSpecError("")
        assert str(error) == "Invalid executable spec: ''"
        assert error.spec == ""

    def test_unresolved_executable_error(self):
        error = UnresolvedExecutableError("/usr/bin/buildifier")
        assert "got str" in str(error)
        assert error.value == "/usr/bin/buildifier"

    def test_probe_spawn_error_with_reason(self):
        error = ProbeSpawnError("/usr/bin/buildifier", "Permission denied")
        assert str(error) == "Failed to start '/usr/bin/buildifier': Permission denied"
        assert error.executable == "/usr/bin/buildifier"
        assert error.reason == "Permission denied"

    def test_probe_spawn_error_without_reason(self):
        assert str(ProbeSpawnError("buildifier")) == "Failed to start 'buildifier'"

    def test_probe_timeout_error(self):
        error = ProbeTimeoutError("buildifier", 2.5)
        assert str(error) == "'buildifier' did not exit within 2.5 seconds"
        assert error.timeout == 2.5

    def test_invalid_config_error_message(self):
        error = InvalidConfigError("toolcheck.conf", 3, "Invalid setting name: 'a b'")
        assert (
            str(error)
            == "Invalid config in toolcheck.conf at line 3: Invalid setting name: 'a b'"
        )
        assert error.line_num == 3

    def test_invalid_config_error_without_line(self):
        error = InvalidConfigError("toolcheck.conf")
        assert str(error) == "Invalid config in toolcheck.conf: Invalid config format"
