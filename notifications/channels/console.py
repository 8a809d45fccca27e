from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from notifications.core.interfaces.notification import Notification
from notifications.core.sinks import OutputSink, default_sink


@dataclass(frozen=True)
class ConsoleLoggerNotification(Notification):
    sink: OutputSink = field(default_factory=default_sink, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, str]] = None, sink: Optional[OutputSink] = None):
        # Takes no options.
        return cls(sink=sink if sink is not None else default_sink())

    def describe(self) -> str:
        return "ConsoleLoggerNotification"

    def render(self, recipient: str, message: str) -> str:
        return f"[ConsoleLogger] To: {recipient} | {message}"
