from __future__ import annotations

from typing import Iterable, Optional


class NotificationError(Exception):
    """Base class for every error raised by the notifications package."""


class UnknownKind(NotificationError, LookupError):
    """
    Raised when a notification kind has no builder.

    Covers both the closed factory (value outside `NotificationType`) and
    registry lookups. `key` is the value the caller passed, not normalized.
    """

    def __init__(self, key, registry: Optional[str] = None, available: Iterable[str] = ()):
        self.key = key
        self.registry = registry
        self.available = tuple(available)
        prefix = f"{registry} registry: " if registry else ""
        message = f"{prefix}no builder registered for '{key}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class InvalidConfiguration(NotificationError, ValueError):
    def __init__(self, option: str, reason: str):
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid value for '{option}': {reason}")


class ActionFailed(NotificationError):
    """Raised by `Notification.send` when its output sink cannot take the line."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Notification delivery failed: {reason}")
