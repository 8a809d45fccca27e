from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from notifications.core.interfaces.notification import Notification, get_option
from notifications.core.sinks import OutputSink, default_sink


DEFAULT_SMTP_SERVER = "smtp.example.com"


@dataclass(frozen=True)
class EmailNotification(Notification):
    smtp_server: str = DEFAULT_SMTP_SERVER
    sink: OutputSink = field(default_factory=default_sink, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, str]] = None, sink: Optional[OutputSink] = None):
        return cls(
            smtp_server=get_option(config, "smtp", DEFAULT_SMTP_SERVER),
            sink=sink if sink is not None else default_sink(),
        )

    def describe(self) -> str:
        return f"EmailNotification (SMTP: {self.smtp_server})"

    def render(self, recipient: str, message: str) -> str:
        # An SMTP client would go here.
        return f"[Email -> {recipient}] via {self.smtp_server}: {message}"
