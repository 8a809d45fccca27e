from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO


class OutputSink(ABC):
    """Where a notification reports what it would have delivered."""

    @abstractmethod
    def emit(self, line: str) -> None:
        pass


def resolve_level(level) -> int:
    """Accept `logging` level ints or names in any case ("info", "WARNING")."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown level: '{level}'")
        return resolved
    return level


class LoggingSink(OutputSink):
    """
    Reports each line on the shared `LoggingSink` logger at `log_level`.

    The logger itself passes everything; instances only pick the level
    their records carry.
    """

    def __init__(self, log_level=logging.INFO):
        self.log_level = resolve_level(log_level)
        self.logger = logging.getLogger(self.__class__.__name__)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.DEBUG)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
            self.logger.addHandler(handler)
            self.logger.propagate = False

    def emit(self, line: str) -> None:
        self.logger.log(self.log_level, line)


class StreamSink(OutputSink):
    """Writes each line to a text stream (stdout unless told otherwise)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def emit(self, line: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()


class BufferSink(OutputSink):
    def __init__(self):
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()


_DEFAULT_SINK: Optional[OutputSink] = None


def default_sink() -> OutputSink:
    global _DEFAULT_SINK
    if _DEFAULT_SINK is None:
        _DEFAULT_SINK = LoggingSink()
    return _DEFAULT_SINK
