from .conf import from_environ, normalize_key
from .context import (
    ContextError,
    JobContext,
    UnknownFieldError,
    create,
    get_conf,
    get_meta,
    get_private,
    modify,
    put_conf,
    put_meta,
    put_private,
    with_separators,
)
from .pairs import split
from .writer import inspect, log, update_counter, update_status, write

# Kernel exports cover the job context and the stream writer operations.
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
    "from_environ",
    "normalize_key",
    "split",
    "write",
    "log",
    "inspect",
    "update_counter",
    "update_status",
]
