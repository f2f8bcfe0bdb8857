"""Error taxonomy for platform selection, browser launch and notifications."""
from __future__ import annotations


class PlatformError(Exception):
    """Base class for every error raised by the platform facade."""


class UnsupportedPlatformError(PlatformError):
    """Host OS identifier has no platform implementation."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"unsupported platform: {identifier}")
        self.identifier = identifier


class InvalidArgumentError(PlatformError, ValueError):
    """Caller passed an argument the operation cannot act on."""


class LaunchError(PlatformError):
    """Launcher process could not be started."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NotifyError(PlatformError):
    """Notification command failed to run or exited non-zero."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.returncode = returncode
