"""Notification collaborators for toolcheck."""

import logging
import webbrowser
from typing import Optional, Protocol, Sequence

DOWNLOAD_ACTION = "Download"


class Notifier(Protocol):
    """Presents a warning with actions and returns the one the user picked."""

    def notify(self, message: str, actions: Sequence[str]) -> Optional[str]:
        ...


class LoggingNotifier:
    """Default notifier that logs the warning and never picks an action."""

    def notify(self, message: str, actions: Sequence[str]) -> Optional[str]:
        logging.warning(message)
        return None


def open_url(url: str) -> bool:
    """Open url in the user's browser."""
    return webbrowser.open(url)
