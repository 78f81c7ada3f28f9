from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

LogLevel = Literal["debug", "info"]

_LEVEL_ORDER: dict[str, int] = {"debug": 10, "info": 20}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log record emitted by the solve use case.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")


def is_enabled(level: str, threshold: str) -> bool:
    # Unknown levels are always emitted so nothing is lost to a typo.
    return _LEVEL_ORDER.get(level, 100) >= _LEVEL_ORDER.get(threshold, 0)


def log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
