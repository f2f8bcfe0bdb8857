"""Linux: xdg-open for URLs, notify-send for notifications."""
from __future__ import annotations

from src.models import NotificationRequest
from src.platforms.base import Platform


class LinuxPlatform(Platform):
    name = "linux"

    def browser_command(self, url: str) -> list[str]:
        return [self.options.executable("xdg-open"), url]

    def notify_command(self, request: NotificationRequest, timestamp: str) -> list[str]:
        # Passed as separate argv entries, so no quoting is needed.
        body = f"{request.message}\n{request.url}\n - Time: {timestamp}"
        return [self.options.executable("notify-send"), request.title, body]
