"""Core data models for the platform layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(now: datetime | None = None) -> str:
    """Local wall-clock time as YYYY-MM-DD HH:MM:SS."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class NotificationRequest:
    """Title, message and url of one notification; consumed by notify()."""

    title: str
    message: str
    url: str


@dataclass(frozen=True)
class PlatformOptions:
    """Per-process tuning of the external commands.

    executables maps a default command name (e.g. "powershell") to the
    program actually run (e.g. "pwsh").
    """

    executables: Mapping[str, str] = field(default_factory=dict, hash=False)
    sound_name: str = "default"
    harden_quoting: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "executables", MappingProxyType(dict(self.executables)))

    def executable(self, name: str) -> str:
        return self.executables.get(name, name)
