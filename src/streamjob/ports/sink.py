from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


# Sink port defines where formatted job lines leave the process (stdio or an in-memory relay).
@runtime_checkable
class Sink(Protocol):
    def put_chars(self, chars: str) -> None:
        """Dispatch a single chunk of already formatted text."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("Sink is a port; use a concrete adapter.")

    def put_requests(self, chunks: Iterable[str]) -> None:
        """Dispatch several chunks as one request, preserving their order."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("Sink is a port; use a concrete adapter.")
