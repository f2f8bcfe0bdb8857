"""Platform abstraction: open a URL, show a notification."""
from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from src.errors import InvalidArgumentError, LaunchError, NotifyError
from src.models import NotificationRequest, PlatformOptions, format_timestamp

logger = logging.getLogger(__name__)


class Platform(ABC):
    """OS strategy: open_browser(url) and notify(title, message, url).

    Subclasses only build argv lists; spawning and error mapping live here.
    """

    name: str = ""

    def __init__(self, options: PlatformOptions | None = None) -> None:
        self._options = options or PlatformOptions()

    @property
    def options(self) -> PlatformOptions:
        return self._options

    @abstractmethod
    def browser_command(self, url: str) -> list[str]:
        """argv that opens url in the default browser."""
        ...

    @abstractmethod
    def notify_command(self, request: NotificationRequest, timestamp: str) -> list[str]:
        """argv that shows the notification for request, stamped with timestamp."""
        ...

    def open_browser(self, url: str) -> None:
        """Start the launcher for url and return without waiting for it."""
        if not url:
            raise InvalidArgumentError("url must not be empty")
        argv = self.browser_command(url)
        logger.debug("%s: launching %s", self.name, argv)
        try:
            subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise LaunchError(f"failed to start {argv[0]}: {e}", cause=e) from e

    def notify(self, title: str, message: str, url: str) -> None:
        """Show a desktop notification and wait for the command to finish."""
        request = NotificationRequest(title=title, message=message, url=url)
        argv = self.notify_command(request, format_timestamp())
        logger.debug("%s: running %s", self.name, argv)
        try:
            # Notifier output may be in any code page (e.g. OEM on Windows).
            subprocess.run(
                argv, check=True, capture_output=True, text=True, errors="replace"
            )
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip()
            msg = f"{argv[0]} exited with status {e.returncode}"
            if detail:
                msg = f"{msg}: {detail[:500]}"
            raise NotifyError(msg, cause=e, returncode=e.returncode) from e
        except OSError as e:
            raise NotifyError(f"failed to run {argv[0]}: {e}", cause=e) from e
