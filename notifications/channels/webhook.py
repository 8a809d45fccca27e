from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from notifications.core.interfaces.notification import Notification, get_option
from notifications.core.sinks import OutputSink, default_sink
from notifications.errors import InvalidConfiguration


DEFAULT_WEBHOOK = "https://hooks.slack.com/default"


@dataclass(frozen=True)
class WebhookNotification(Notification):
    """
    Notification posted to an HTTP webhook (Slack, Teams, ...).

    `label` names the service in descriptions and delivery lines, so a
    "Slack" webhook describes itself as `SlackNotification (webhook: ...)`.
    Not registered by default: callers add it under whatever key they like.
    """

    webhook: str = DEFAULT_WEBHOOK
    label: str = "Webhook"
    sink: OutputSink = field(default_factory=default_sink, repr=False, compare=False)

    def __post_init__(self):
        if not self.webhook.startswith(("http://", "https://")):
            raise InvalidConfiguration("webhook", f"'{self.webhook}' is not an http(s) URL")

    @classmethod
    def from_config(
        cls,
        config: Optional[Mapping[str, str]] = None,
        sink: Optional[OutputSink] = None,
        *,
        label: str = "Webhook",
        default_webhook: str = DEFAULT_WEBHOOK,
    ):
        return cls(
            webhook=get_option(config, "webhook", default_webhook),
            label=label,
            sink=sink if sink is not None else default_sink(),
        )

    def describe(self) -> str:
        return f"{self.label}Notification (webhook: {self.webhook})"

    def render(self, recipient: str, message: str) -> str:
        return f"[{self.label} -> {recipient}] webhook:{self.webhook} message:{message}"
