from __future__ import annotations

from typing import Protocol, runtime_checkable

from goldbach_pair.observability.logging import LogMessage


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one structured log record."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Release any resources held by the sink."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
