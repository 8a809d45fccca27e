from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Union

from notifications.channels.email import EmailNotification
from notifications.channels.push import PushNotification
from notifications.channels.sms import SMSNotification
from notifications.core.interfaces.notification import Notification
from notifications.core.sinks import OutputSink
from notifications.errors import UnknownKind


class NotificationType(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


def _coerce_type(kind) -> NotificationType:
    if isinstance(kind, NotificationType):
        return kind
    if not isinstance(kind, str):
        raise UnknownKind(kind)
    try:
        return NotificationType(kind.lower())
    except ValueError:
        raise UnknownKind(kind, available=[t.value for t in NotificationType]) from None


def create_notification(
    kind: Union[NotificationType, str],
    config: Optional[Mapping[str, str]] = None,
    *,
    sink: Optional[OutputSink] = None,
) -> Notification:
    """
    Closed factory over the built-in notification kinds.

    Parameters
    ----------
    kind: NotificationType | str
        Member of `NotificationType` or its value, compared case-insensitively.
    config: Mapping[str, str] | None
        Construction options; missing options fall back to each kind's default.
    sink: OutputSink | None
        Where the created notification reports deliveries.

    Use `notifications.registry` when new kinds must be added at runtime.
    """
    notification_type = _coerce_type(kind)

    if notification_type is NotificationType.EMAIL:
        return EmailNotification.from_config(config, sink=sink)
    if notification_type is NotificationType.SMS:
        return SMSNotification.from_config(config, sink=sink)
    if notification_type is NotificationType.PUSH:
        return PushNotification.from_config(config, sink=sink)

    raise UnknownKind(kind)
