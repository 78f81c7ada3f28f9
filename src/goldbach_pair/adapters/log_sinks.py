from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from goldbach_pair.observability.logging import LogMessage, log_to_dict
from goldbach_pair.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Console sink; defaults to stderr so stdout stays reserved for results.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(_encode(message) + "\n")

    def close(self) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.flush()


class JsonlLogSink(LogSink):
    # File-backed structured log sink, one record per line.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            raise RuntimeError("JsonlLogSink is closed")
        self._file.write(_encode(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        # Close is idempotent.
        if self._file is None:
            return
        self._file.close()
        self._file = None


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        return None


def build_log_sink(kind: str, path: str | None = None) -> LogSink:
    # Sink selection mirrors logging.sink in the YAML config.
    if kind == "stdout":
        return StdoutLogSink()
    if kind == "jsonl":
        if not path:
            raise ValueError("logging.jsonl.path must be a non-empty string")
        return JsonlLogSink(Path(path))
    if kind == "none":
        return NullLogSink()
    raise ValueError(f"Unknown log sink kind: {kind}")


def _encode(message: LogMessage) -> str:
    return json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
