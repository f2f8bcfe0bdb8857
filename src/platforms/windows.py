"""Windows: cmd start for URLs, BurntToast through PowerShell for notifications."""
from __future__ import annotations

from src.models import NotificationRequest
from src.platforms.base import Platform


def _ps_quote(value: str) -> str:
    """Escape value for a PowerShell single-quoted string."""
    return value.replace("'", "''")


class WindowsPlatform(Platform):
    name = "windows"

    def browser_command(self, url: str) -> list[str]:
        return [self.options.executable("cmd"), "/c", "start", url]

    def notify_command(self, request: NotificationRequest, timestamp: str) -> list[str]:
        title, message, url = request.title, request.message, request.url
        # Values are embedded in script text; unescaped unless harden_quoting.
        if self.options.harden_quoting:
            title, message, url = _ps_quote(title), _ps_quote(message), _ps_quote(url)
        script = (
            f"New-BurntToastNotification -Text '{title}', "
            f"'{message} {url} - Time: {timestamp}'"
        )
        return [self.options.executable("powershell"), "-Command", script]
