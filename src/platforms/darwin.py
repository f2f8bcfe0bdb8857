"""macOS: open(1) for URLs, osascript display notification."""
from __future__ import annotations

from src.models import NotificationRequest
from src.platforms.base import Platform


def _applescript_quote(value: str) -> str:
    """Escape value for an AppleScript double-quoted string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


class DarwinPlatform(Platform):
    name = "darwin"

    def browser_command(self, url: str) -> list[str]:
        return [self.options.executable("open"), url]

    def notify_command(self, request: NotificationRequest, timestamp: str) -> list[str]:
        title, message, url = request.title, request.message, request.url
        sound = self.options.sound_name
        if self.options.harden_quoting:
            title, message, url, sound = (
                _applescript_quote(v) for v in (title, message, url, sound)
            )
        script = (
            f'display notification "{message} {url} - Time: {timestamp}" '
            f'with title "{title}" sound name "{sound}"'
        )
        return [self.options.executable("osascript"), "-e", script]
