from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from notifications.core.sinks import OutputSink
from notifications.errors import ActionFailed, InvalidConfiguration


class Notification(ABC):
    """
    Common contract for every notification kind.

    Concrete kinds are immutable: their attributes are fixed from the
    configuration at construction time. `send` never talks to a real
    transport; it renders the delivery line and hands it to `sink`.
    """

    sink: OutputSink

    @abstractmethod
    def describe(self) -> str:
        """Human-readable summary including the kind's distinguishing attribute."""
        pass

    @abstractmethod
    def render(self, recipient: str, message: str) -> str:
        """Return the line reported for a delivery to `recipient`."""
        pass

    def send(self, recipient: str, message: str) -> None:
        line = self.render(recipient, message)
        try:
            self.sink.emit(line)
        except (OSError, ValueError) as exc:
            raise ActionFailed(str(exc)) from exc


def get_option(config: Optional[Mapping[str, Any]], option: str, default: str) -> str:
    """Read a string option from a configuration mapping, falling back to `default`."""
    if config is None:
        return default
    value = config.get(option, default)
    if not isinstance(value, str):
        raise InvalidConfiguration(option, f"expected a string, got {type(value).__name__}")
    return value
