from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})


@dataclass(frozen=True, slots=True)
class LogMessage:
    """Lifecycle event from a library component (a relay starting, flushing, stopping).

    These never travel on a job's sinks: they go to a LogSink so that captured
    output and diagnostics only ever hold what the job itself wrote.
    """

    source: str
    level: str
    message: str
    fields: dict[str, object] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"LogMessage.level must be one of {sorted(LOG_LEVELS)}, got {self.level!r}")
        if not self.source or not self.message:
            raise ValueError("LogMessage requires non-empty source/message")

    @classmethod
    def info(cls, source: str, message: str, **fields: object) -> LogMessage:
        return cls(source=source, level="info", message=message, fields=dict(fields))
