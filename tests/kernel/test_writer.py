from __future__ import annotations

from collections.abc import Iterable

import pytest

from streamjob.adapters.relay import Relay
from streamjob.kernel.context import JobContext, create, with_separators
from streamjob.kernel.writer import inspect, log, update_counter, update_status, write


class RecordingSink:
    # Minimal Sink double that keeps every dispatched chunk.
    def __init__(self) -> None:
        self.chunks: list[str] = []

    def put_chars(self, chars: str) -> None:
        self.chunks.append(chars)

    def put_requests(self, chunks: Iterable[str]) -> None:
        self.chunks.extend(chunks)


@pytest.fixture
def sinks() -> tuple[RecordingSink, RecordingSink]:
    return RecordingSink(), RecordingSink()


@pytest.fixture
def ctx(sinks: tuple[RecordingSink, RecordingSink]) -> JobContext:
    output, diagnostic = sinks
    return create({"conf": {}, "output_sink": output, "diagnostic_sink": diagnostic})


def test_write_uses_tab_without_configured_separators(ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]) -> None:
    output, diagnostic = sinks
    write(ctx, "k", "v")
    assert output.chunks == ["k\tv\n"]
    assert diagnostic.chunks == []


def test_write_uses_configured_output_separator(ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]) -> None:
    output, _ = sinks
    write(with_separators(ctx, ",", ";"), "k", "v")
    assert output.chunks == ["k;v\n"]


def test_write_accepts_pair(ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]) -> None:
    output, _ = sinks
    write(ctx, ("word", 3))
    assert output.chunks == ["word\t3\n"]


@pytest.mark.parametrize("pair", ["ok", "abc", ["k", "v"], ("k", "v", "extra")])
def test_write_single_argument_must_be_a_pair_tuple(
    pair: object, ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]
) -> None:
    output, _ = sinks
    with pytest.raises(TypeError):
        write(ctx, pair)
    assert output.chunks == []


def test_write_rejects_extra_arguments(ctx: JobContext) -> None:
    with pytest.raises(TypeError):
        write(ctx, "k", "v", "extra")  # type: ignore[call-arg]


def test_log_goes_to_diagnostic_sink(ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]) -> None:
    output, diagnostic = sinks
    log(ctx, "starting up")
    assert diagnostic.chunks == ["starting up\n"]
    assert output.chunks == []


def test_inspect_returns_value_with_context_in_either_position(
    ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]
) -> None:
    _, diagnostic = sinks
    value = {"a": [1, 2]}
    assert inspect(value, ctx) is value
    assert inspect(ctx, value) is value
    assert diagnostic.chunks == ["{'a': [1, 2]}\n", "{'a': [1, 2]}\n"]


def test_inspect_passes_formatter_options(ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]) -> None:
    _, diagnostic = sinks
    inspect(ctx, ["alpha", "beta"], width=1)
    assert diagnostic.chunks == ["['alpha',\n 'beta']\n"]


def test_inspect_requires_a_context() -> None:
    with pytest.raises(TypeError):
        inspect("value", "not a context")


def test_update_counter_wire_format(ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]) -> None:
    output, diagnostic = sinks
    update_counter(ctx, "g", "c", 5)
    update_counter(ctx, "words", "seen")
    assert diagnostic.chunks == ["reporter:counter:g,c,5\n", "reporter:counter:words,seen,1\n"]
    assert output.chunks == []


def test_update_status_wire_format(ctx: JobContext, sinks: tuple[RecordingSink, RecordingSink]) -> None:
    _, diagnostic = sinks
    update_status(ctx, "halfway there")
    assert diagnostic.chunks == ["reporter:status:halfway there\n"]


def test_writer_against_relays(relay_context: JobContext, relay: Relay, diagnostic_relay: Relay) -> None:
    # Output and diagnostics stay on separate relays.
    write(relay_context, "b", "val1")
    write(relay_context, "a", "val2")
    update_counter(relay_context, "g", "c", 5)
    assert relay.get() == ["b\tval1\n", "a\tval2\n"]
    assert relay.sort() == ["a\tval2\n", "b\tval1\n"]
    assert diagnostic_relay.get() == ["reporter:counter:g,c,5\n"]
