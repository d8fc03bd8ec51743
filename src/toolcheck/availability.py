"""Availability check orchestration for toolcheck."""

import logging
from typing import Optional

from .config_manager import ConfigManager
from .environment_helper import debug_log
from .locator import Locator
from .notifier import DOWNLOAD_ACTION, LoggingNotifier, Notifier, open_url
from .probe_result import BUILDTOOLS_RELEASES_URL, CheckOutcome, ProbeResult
from .prober import CompatibilityProber
from .types import ExecutableSpec, UrlOpener


def build_download_message(reason: str) -> str:
    """Build the warning shown when buildifier is missing or unusable."""
    return (
        f"{reason}; linting and formatting of Bazel files "
        "will not be available. Please download it from "
        f"{BUILDTOOLS_RELEASES_URL} and install it "
        "on your system PATH or set its location in Settings."
    )


class AvailabilityChecker:
    """Checks whether buildifier is available and compatible."""

    def __init__(
        self,
        locator: Optional[Locator] = None,
        prober: Optional[CompatibilityProber] = None,
        notifier: Optional[Notifier] = None,
        url_opener: Optional[UrlOpener] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        self.config_manager = config_manager or ConfigManager()
        self.locator = locator or Locator()
        # None means a prober is built per check from the current settings.
        self.prober = prober
        self.notifier = notifier or LoggingNotifier()
        self.url_opener = url_opener or open_url

    async def check_availability(
        self, spec: Optional[ExecutableSpec] = None
    ) -> CheckOutcome:
        """
        Resolve and probe the executable.

        Args:
            spec: Executable name or path; the configured one when omitted

        Returns:
            CheckOutcome with the status and, unless compatible, a reason
        """
        settings = self.config_manager.load_settings()
        if spec is None:
            spec = settings.executable
        prober = self.prober or CompatibilityProber(timeout=settings.probe_timeout)

        resolved = self.locator.resolve(spec)
        status = await prober.probe(resolved)
        debug_log(f"check_availability: {spec!r} -> {status.value}")
        return CheckOutcome.from_status(status)

    async def check_and_notify(
        self, spec: Optional[ExecutableSpec] = None
    ) -> CheckOutcome:
        """
        Run the check and warn the user when buildifier is not usable.

        The notifier is only called for non-compatible outcomes. If the user
        picks the download action, the releases page is opened.
        """
        outcome = await self.check_availability(spec)
        if outcome.status is ProbeResult.COMPATIBLE:
            return outcome

        self._show_download_prompt(outcome.reason or "")
        return outcome

    def _show_download_prompt(self, reason: str) -> None:
        """Show the warning and open the releases page if requested."""
        try:
            choice = self.notifier.notify(
                build_download_message(reason), [DOWNLOAD_ACTION]
            )
            if choice == DOWNLOAD_ACTION:
                self.url_opener(BUILDTOOLS_RELEASES_URL)
        except Exception as e:
            logging.error(f"Failed to show buildifier download prompt: {e}")


async def check_availability(spec: Optional[ExecutableSpec] = None) -> CheckOutcome:
    """Check buildifier availability with the default collaborators."""
    return await AvailabilityChecker().check_availability(spec)


async def check_buildifier_is_available(
    notifier: Optional[Notifier] = None,
) -> CheckOutcome:
    """
    Check whether buildifier is available (either at the system PATH or a
    user-specified path, depending on the settings).

    If not available, a warning is presented through `notifier` with a
    Download action that opens the GitHub releases page.
    """
    return await AvailabilityChecker(notifier=notifier).check_and_notify()
