from .logging import JsonlLogSink, LogSink, NoOpLogSink, StderrLogSink, log_jsonl, log_noop, log_stderr

__all__ = [
    "LogSink",
    "NoOpLogSink",
    "StderrLogSink",
    "JsonlLogSink",
    "log_noop",
    "log_stderr",
    "log_jsonl",
]
