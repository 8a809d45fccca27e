from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from notifications.core.interfaces.notification import Notification, get_option
from notifications.core.sinks import OutputSink, default_sink


DEFAULT_APP_ID = "com.example.app"


@dataclass(frozen=True)
class PushNotification(Notification):
    app_id: str = DEFAULT_APP_ID
    sink: OutputSink = field(default_factory=default_sink, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, str]] = None, sink: Optional[OutputSink] = None):
        # Option name is camel-cased to match existing client configs.
        return cls(
            app_id=get_option(config, "appId", DEFAULT_APP_ID),
            sink=sink if sink is not None else default_sink(),
        )

    def describe(self) -> str:
        return f"PushNotification (AppId: {self.app_id})"

    def render(self, recipient: str, message: str) -> str:
        return f"[Push -> {recipient}] (AppId:{self.app_id}): {message}"
