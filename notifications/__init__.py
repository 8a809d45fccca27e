from notifications.errors import ActionFailed, InvalidConfiguration, NotificationError, UnknownKind
from notifications.factory import NotificationType, create_notification
from notifications.registry import create_default_registry, get_registry, register_notification

__all__ = [
    "ActionFailed",
    "InvalidConfiguration",
    "NotificationError",
    "NotificationType",
    "UnknownKind",
    "create_default_registry",
    "create_notification",
    "get_registry",
    "register_notification",
]
