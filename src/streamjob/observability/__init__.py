from __future__ import annotations

from streamjob.adapters.contracts import resolve_adapter
from streamjob.config.models import LogSettings

from .adapters import JsonlLogSink, LogSink, NoOpLogSink, StderrLogSink
from .adapters import logging as logging_adapters
from .domain import LogMessage


def build_log_sink(settings: LogSettings | None) -> LogSink:
    # Resolve a log sink factory by adapter name; absent settings mean no lifecycle logging.
    if settings is None:
        return NoOpLogSink()
    factory = resolve_adapter(settings.name, [logging_adapters], kind="log.sink")
    return factory(dict(settings.settings))


__all__ = [
    "LogMessage",
    "LogSink",
    "NoOpLogSink",
    "StderrLogSink",
    "JsonlLogSink",
    "build_log_sink",
]
