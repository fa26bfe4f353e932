"""Pytest fixtures for exercising job code against relays.

Enable with ``pytest_plugins = ["streamjob.testing"]`` in a conftest. Every
test gets fresh relays, stopped on teardown, so captured output never leaks
between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from streamjob.adapters.relay import Relay
from streamjob.kernel.context import JobContext, create


@pytest.fixture
def relay() -> Iterator[Relay]:
    # Captures the output (result record) stream.
    with Relay.create({"name": "output"}) as output:
        yield output


@pytest.fixture
def diagnostic_relay() -> Iterator[Relay]:
    # Captures logs, counters and status reports.
    with Relay.create({"name": "diagnostic"}) as diagnostic:
        yield diagnostic


@pytest.fixture
def relay_context(relay: Relay, diagnostic_relay: Relay) -> JobContext:
    # Empty configuration rather than the environment keeps tests deterministic.
    return create({"conf": {}, "output_sink": relay, "diagnostic_sink": diagnostic_relay})
