from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from streamjob.adapters import stdio
from streamjob.adapters.contracts import AdapterLookupError, resolve_adapter
from streamjob.adapters.stdio import STDERR, STDOUT
from streamjob.kernel.conf import from_environ, normalize_key
from streamjob.ports.sink import Sink

SEPARATORS_KEY = "separators"

SINK_FIELDS = ("output_sink", "diagnostic_sink")


class ContextError(ValueError):
    # Raised when a job context cannot be built from the supplied fields.
    pass


class UnknownFieldError(ContextError):
    pass


@dataclass(frozen=True, slots=True)
class JobContext:
    """Per-step job state handed to mappers and reducers.

    The context is a value: every ``put_*`` helper and ``modify`` return a new
    context and leave the original untouched. Only the two sinks are shared
    between copies, since they are handles to a destination rather than data.

    ``private`` belongs to job code and is the place to carry state between
    steps. ``meta`` belongs to the library (it holds the active separator pair,
    among other things) and job code should not depend on its shape.
    """

    args: tuple[str, ...] = ()
    private: dict[str, Any] = field(default_factory=dict)
    conf: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)
    output_sink: Sink = STDOUT
    diagnostic_sink: Sink = STDERR


FIELD_NAMES = frozenset(item.name for item in fields(JobContext))


class _ContextFields(BaseModel):
    # Validation model for create(); unknown or mistyped fields fail at build time.
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)
    args: tuple[str, ...] = ()
    private: dict[str, Any] = Field(default_factory=dict)
    conf: dict[str, Any] | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    output_sink: Sink = STDOUT
    diagnostic_sink: Sink = STDERR


def create(initial: Mapping[str, object] | Iterable[tuple[str, object]] | None = None) -> JobContext:
    # Build a context from defaults, overlaying caller fields; conf defaults to the environment snapshot.
    if initial is None:
        initial = {}
    if isinstance(initial, (str, bytes)):
        raise ContextError("context fields must be a mapping or (field, value) pairs")
    try:
        pairs = dict(initial)
    except (TypeError, ValueError) as exc:
        raise ContextError("context fields must be a mapping or (field, value) pairs") from exc
    for name in SINK_FIELDS:
        if isinstance(pairs.get(name), str):
            pairs[name] = _resolve_sink(pairs[name])
    try:
        parsed = _ContextFields.model_validate(pairs)
    except ValidationError as exc:
        raise ContextError(f"invalid context fields: {exc}") from exc

    conf = from_environ() if parsed.conf is None else {normalize_key(str(k)): v for k, v in parsed.conf.items()}
    return JobContext(
        args=parsed.args,
        private=parsed.private,
        conf=conf,
        meta=parsed.meta,
        output_sink=parsed.output_sink,
        diagnostic_sink=parsed.diagnostic_sink,
    )


def get_conf(ctx: JobContext, key: str, default: Any = None) -> Any:
    # Missing keys are never an error: configuration is arbitrary external data.
    return ctx.conf.get(normalize_key(key), default)


def put_conf(ctx: JobContext, key: str, value: Any) -> JobContext:
    # Only the context copy changes; os.environ is left alone.
    return replace(ctx, conf={**ctx.conf, normalize_key(key): value})


def get_private(ctx: JobContext, key: str, default: Any = None) -> Any:
    return ctx.private.get(key, default)


def put_private(ctx: JobContext, key: str, value: Any) -> JobContext:
    return replace(ctx, private={**ctx.private, key: value})


def get_meta(ctx: JobContext, key: str, default: Any = None) -> Any:
    # Library bookkeeping; not for use by job code.
    return ctx.meta.get(key, default)


def put_meta(ctx: JobContext, key: str, value: Any) -> JobContext:
    # Library bookkeeping; not for use by job code.
    return replace(ctx, meta={**ctx.meta, key: value})


def with_separators(ctx: JobContext, input_separator: str, output_separator: str) -> JobContext:
    # Mapper/reducer phases record the active (input, output) separator pair here.
    if not input_separator or not output_separator:
        raise ContextError("separators must be non-empty strings")
    return put_meta(ctx, SEPARATORS_KEY, (input_separator, output_separator))


def modify(ctx: JobContext, name: str, value: Any) -> JobContext:
    # Raw top-level replace for library internals; an unknown field is a programming error.
    if name not in FIELD_NAMES:
        raise UnknownFieldError(f"JobContext has no field '{name}'")
    return replace(ctx, **{name: value})


def _resolve_sink(name: str) -> Sink:
    # Sinks may be named by adapter ("sink_stdout", "sink_stderr") instead of passed as handles.
    try:
        factory = resolve_adapter(name, [stdio], kind="stdio.sink")
    except AdapterLookupError as exc:
        raise ContextError(f"unknown sink adapter '{name}'") from exc
    return factory({})
