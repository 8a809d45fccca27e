from notifications.channels.console import ConsoleLoggerNotification
from notifications.channels.email import EmailNotification
from notifications.channels.push import PushNotification
from notifications.channels.sms import SMSNotification
from notifications.channels.webhook import WebhookNotification

__all__ = [
    "ConsoleLoggerNotification",
    "EmailNotification",
    "PushNotification",
    "SMSNotification",
    "WebhookNotification",
]
