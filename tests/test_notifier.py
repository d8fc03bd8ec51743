"""Tests for the notification collaborators in toolcheck."""

import logging

from toolcheck.notifier import DOWNLOAD_ACTION, LoggingNotifier, open_url


class TestLoggingNotifier:
    """Unit tests for the default notifier."""

    def test_logs_warning_and_picks_nothing(self, caplog):
        with caplog.at_level(logging.WARNING):
            choice = LoggingNotifier().notify("Buildifier was not found", [DOWNLOAD_ACTION])

        assert choice is None
        assert "Buildifier was not found" in caplog.text


class TestOpenUrl:
    """Unit tests for the default URL opener."""

    def test_uses_webbrowser(self, mocker):
        browser_open = mocker.patch("webbrowser.open", return_value=True)

        assert open_url("https://example.com") is True
        browser_open.assert_called_once_with("https://example.com")
