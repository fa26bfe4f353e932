from .adapters.relay import Relay, RelayClosedError, RelayMessage, default_comparator
from .adapters.stdio import STDERR, STDOUT, StdioSink
from .kernel import (
    ContextError,
    JobContext,
    UnknownFieldError,
    create,
    get_conf,
    get_meta,
    get_private,
    inspect,
    log,
    modify,
    put_conf,
    put_meta,
    put_private,
    update_counter,
    update_status,
    with_separators,
    write,
)
from .ports import Sink

__all__ = [
    "JobContext",
    "ContextError",
    "UnknownFieldError",
    "create",
    "get_conf",
    "put_conf",
    "get_private",
    "put_private",
    "get_meta",
    "put_meta",
    "with_separators",
    "modify",
    "write",
    "log",
    "inspect",
    "update_counter",
    "update_status",
    "Sink",
    "StdioSink",
    "STDOUT",
    "STDERR",
    "Relay",
    "RelayClosedError",
    "RelayMessage",
    "default_comparator",
]
