from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from notifications.core.interfaces.notification import Notification, get_option
from notifications.core.sinks import OutputSink, default_sink


DEFAULT_PROVIDER = "Twilio"


@dataclass(frozen=True)
class SMSNotification(Notification):
    provider: str = DEFAULT_PROVIDER
    sink: OutputSink = field(default_factory=default_sink, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, str]] = None, sink: Optional[OutputSink] = None):
        return cls(
            provider=get_option(config, "provider", DEFAULT_PROVIDER),
            sink=sink if sink is not None else default_sink(),
        )

    def describe(self) -> str:
        return f"SMSNotification (Provider: {self.provider})"

    def render(self, recipient: str, message: str) -> str:
        return f"[SMS -> {recipient}] using {self.provider}: {message}"
