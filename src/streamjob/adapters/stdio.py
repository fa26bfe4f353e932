from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, TextIO

from streamjob.adapters.contracts import adapter
from streamjob.ports.sink import Sink

StreamName = Literal["stdout", "stderr"]


@dataclass(frozen=True, slots=True)
class StdioSink(Sink):
    # Process standard stream sink; the stream is looked up on every write so redirection is honoured.
    stream: StreamName

    def put_chars(self, chars: str) -> None:
        handle = self._handle()
        handle.write(chars)
        handle.flush()

    def put_requests(self, chunks: Iterable[str]) -> None:
        handle = self._handle()
        for chunk in chunks:
            handle.write(chunk)
        handle.flush()

    def _handle(self) -> TextIO:
        # Transport failures (closed pipe etc.) propagate and end the job step.
        return getattr(sys, self.stream)


STDOUT = StdioSink("stdout")
STDERR = StdioSink("stderr")


@adapter(name="sink_stdout", kind="stdio.sink")
def sink_stdout(settings: dict[str, object]) -> StdioSink:
    # Result records channel; the batch framework reads job output from here.
    _ = settings
    return STDOUT


@adapter(name="sink_stderr", kind="stdio.sink")
def sink_stderr(settings: dict[str, object]) -> StdioSink:
    # Diagnostics channel; logs, counters and status reports go here.
    _ = settings
    return STDERR
