from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Protocol, runtime_checkable

from streamjob.adapters.contracts import adapter
from streamjob.observability.domain.logging import LogMessage


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        raise NotImplementedError("LogSink.emit must be implemented")


class NoOpLogSink:
    # Default sink when no lifecycle logging is configured.
    def emit(self, message: LogMessage) -> None:
        _ = message


class StderrLogSink:
    # Compact JSON lines on stderr; stdout carries job results and must stay clean.
    def emit(self, message: LogMessage) -> None:
        sys.stderr.write(json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False) + "\n")
        sys.stderr.flush()


class JsonlLogSink:
    # File-backed structured log sink for lifecycle diagnostics.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


@adapter(name="log_noop", kind="log.sink")
def log_noop(settings: dict[str, object]) -> NoOpLogSink:
    _ = settings
    return NoOpLogSink()


@adapter(name="log_stderr", kind="log.sink")
def log_stderr(settings: dict[str, object]) -> StderrLogSink:
    _ = settings
    return StderrLogSink()


@adapter(name="log_jsonl", kind="log.sink")
def log_jsonl(settings: dict[str, object]) -> JsonlLogSink:
    path = settings.get("path")
    if not isinstance(path, str) or not path:
        raise ValueError("log_jsonl.settings.path must be a non-empty string")
    return JsonlLogSink(Path(path))


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "source": message.source,
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
