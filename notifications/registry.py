from __future__ import annotations

import threading
from functools import partial
from typing import Callable, Dict, Mapping, Optional

from notifications.channels.email import EmailNotification
from notifications.channels.push import PushNotification
from notifications.channels.sms import SMSNotification
from notifications.core.interfaces.notification import Notification
from notifications.core.sinks import OutputSink
from notifications.utils.registry import Registry

NotificationBuilder = Callable[[Mapping[str, str]], Notification]

BUILTIN_BUILDERS: Dict[str, Callable[..., Notification]] = {
    "email": EmailNotification.from_config,
    "sms": SMSNotification.from_config,
    "push": PushNotification.from_config,
}


def create_default_registry(sink: Optional[OutputSink] = None, seed_defaults: bool = True) -> Registry[Notification]:
    """
    Build a fresh notification registry.

    With `seed_defaults` the built-in email/sms/push kinds are registered,
    each bound to `sink`. Without it the registry starts empty.
    """
    registry: Registry[Notification] = Registry("notification")
    if seed_defaults:
        for name, builder in BUILTIN_BUILDERS.items():
            registry.register(name, partial(builder, sink=sink))
    return registry


_REGISTRY: Optional[Registry[Notification]] = None
_REGISTRY_LOCK = threading.Lock()


def get_registry() -> Registry[Notification]:
    """Process-wide registry, seeded with the built-in kinds on first use."""
    global _REGISTRY
    if _REGISTRY is None:
        with _REGISTRY_LOCK:
            if _REGISTRY is None:
                _REGISTRY = create_default_registry()
    return _REGISTRY


def reset_registry() -> None:
    global _REGISTRY
    with _REGISTRY_LOCK:
        _REGISTRY = None


def register_notification(name: str, registry: Optional[Registry[Notification]] = None):
    def decorator(builder: NotificationBuilder) -> NotificationBuilder:
        (registry if registry is not None else get_registry()).register(name, builder)
        return builder
    return decorator
