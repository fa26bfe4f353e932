"""Hadoop Streaming wire output for job code.

Results go to the context's output sink, which the framework reads as the
job's record stream. Everything else (logs, inspected values, counter and
status reports) goes to the diagnostic sink so the record stream stays clean.
"""

from __future__ import annotations

from pprint import pformat
from typing import Any, TypeVar, overload

from streamjob.kernel.context import SEPARATORS_KEY, JobContext, get_meta
from streamjob.kernel.pairs import DEFAULT_SEPARATOR

T = TypeVar("T")


@overload
def write(ctx: JobContext, key: tuple[Any, Any]) -> None: ...


@overload
def write(ctx: JobContext, key: Any, value: Any) -> None: ...


def write(ctx: JobContext, key: Any, *rest: Any) -> None:
    # Accepts write(ctx, key, value) and write(ctx, (key, value)).
    if not rest:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("write() takes a (key, value) pair or a key and a value")
        key, value = key
    elif len(rest) == 1:
        value = rest[0]
    else:
        raise TypeError("write() takes a (key, value) pair or a key and a value")
    ctx.output_sink.put_chars(f"{key}{_output_separator(ctx)}{value}\n")


def log(ctx: JobContext, message: object) -> None:
    ctx.diagnostic_sink.put_chars(f"{message}\n")


def inspect(value: Any, ctx: Any, **opts: Any) -> Any:
    # Either argument may be the context, so this chains like a tap in a pipeline.
    if isinstance(value, JobContext) and not isinstance(ctx, JobContext):
        value, ctx = ctx, value
    if not isinstance(ctx, JobContext):
        raise TypeError("inspect() requires a JobContext argument")
    ctx.diagnostic_sink.put_chars(f"{pformat(value, **opts)}\n")
    return value


def update_counter(ctx: JobContext, group: str, counter: str, amount: int | float = 1) -> None:
    # Parsed by the framework; the exact layout must not change.
    ctx.diagnostic_sink.put_chars(f"reporter:counter:{group},{counter},{amount}\n")


def update_status(ctx: JobContext, status: str) -> None:
    ctx.diagnostic_sink.put_chars(f"reporter:status:{status}\n")


def _output_separator(ctx: JobContext) -> str:
    separators = get_meta(ctx, SEPARATORS_KEY)
    if isinstance(separators, tuple) and len(separators) == 2:
        return separators[1]
    return DEFAULT_SEPARATOR
