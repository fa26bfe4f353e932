"""In-memory relay sink for capturing job output.

A Relay stands in for stdout/stderr: bind it as a context sink and every line
the job writes lands in an ordered buffer that tests (or an in-process
map/reduce driver) can read back, sort the way Hadoop sorts between stages,
forward elsewhere, or throw away.

Each Relay is a single worker thread that owns the buffer. Callers never touch
the buffer directly; they put requests on the worker's mailbox and wait on a
per-request reply queue. Requests are handled one at a time in arrival order,
so writes from one caller are buffered in the order they were made.

Write requests are acknowledged as soon as the worker picks them up, before
the chunks are appended. The worker appends before taking the next request,
so anything queued after the acknowledgement already sees the write.
"""

from __future__ import annotations

import queue
import threading
import weakref
from collections import deque
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Literal, NamedTuple, Protocol

from streamjob.config.models import RelayOptions
from streamjob.kernel.pairs import split
from streamjob.observability import LogMessage, build_log_sink
from streamjob.ports.sink import Sink

Comparator = Callable[[str, str], int]

RELAY_TAG = "relay"

# Interval for re-checking worker liveness while waiting on a reply.
_POLL_SECONDS = 0.1


class RelayClosedError(RuntimeError):
    # Raised for any operation other than stop() on a stopped relay.
    pass


class RelayMessage(NamedTuple):
    # Forwarded buffer element, shaped as a (tag, payload) pair.
    tag: str
    payload: str


class Recipient(Protocol):
    def put(self, item: RelayMessage) -> None: ...


@dataclass(frozen=True, slots=True)
class _IoRequest:
    reply: queue.SimpleQueue[object]
    chunks: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class _Call:
    op: Literal["raw", "flush"]
    reply: queue.SimpleQueue[object]


@dataclass(frozen=True, slots=True)
class _Stop:
    pass


_ACK = "ok"


def default_comparator(left: str, right: str) -> int:
    # Hadoop's default shuffle order: ascending by the text before the first tab.
    left_key, _ = split(left)
    right_key, _ = split(right)
    return (left_key > right_key) - (left_key < right_key)


def _serve(mailbox: queue.Queue[object]) -> None:
    # Worker loop; the buffer is newest-first and lives only in this frame.
    buffer: deque[str] = deque()
    while True:
        request = mailbox.get()
        if isinstance(request, _IoRequest):
            request.reply.put(_ACK)
            buffer.extendleft(request.chunks)
        elif isinstance(request, _Call):
            if request.op == "raw":
                request.reply.put(list(buffer))
            else:
                discarded = len(buffer)
                buffer = deque()
                request.reply.put(discarded)
        elif isinstance(request, _Stop):
            return
        else:
            raise TypeError(f"relay received unsupported request {request!r}")


def _abandon(mailbox: queue.Queue[object]) -> None:
    # Finalizer for relays dropped without stop(); must not reference the Relay itself.
    try:
        mailbox.put_nowait(_Stop())
    except queue.Full:
        # A full mailbox means a writer still holds the relay; the daemon worker ends with the process.
        return


class Relay(Sink):
    def __init__(self, options: RelayOptions) -> None:
        self._options = options
        self._mailbox: queue.Queue[object] = queue.Queue(maxsize=options.mailbox_size)
        self._log = build_log_sink(options.log)
        self._lock = threading.Lock()
        self._stopped = False
        self._worker = threading.Thread(
            target=_serve,
            args=(self._mailbox,),
            name=f"relay-{options.name}",
            daemon=True,
        )
        self._worker.start()
        # Dropping the last handle stops the worker, so an abandoned test cannot leak a live relay.
        self._finalizer = weakref.finalize(self, _abandon, self._mailbox)
        self._emit("relay.started")

    @classmethod
    def create(cls, options: RelayOptions | Mapping[str, Any] | None = None) -> Relay:
        if options is None:
            options = RelayOptions()
        elif not isinstance(options, RelayOptions):
            options = RelayOptions.model_validate(dict(options))
        return cls(options)

    @property
    def name(self) -> str:
        return self._options.name

    @property
    def stopped(self) -> bool:
        return self._stopped

    def __enter__(self) -> Relay:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def put_chars(self, chars: str) -> None:
        self.put_requests((chars,))

    def put_requests(self, chunks: Iterable[str]) -> None:
        # One mailbox request per call; chunk order inside the request is kept.
        request = _IoRequest(reply=queue.SimpleQueue(), chunks=tuple(str(chunk) for chunk in chunks))
        self._send(request)
        self._await(request.reply)

    def raw(self) -> list[str]:
        """Return the buffer as held by the worker, newest line first."""
        return self._call("raw")  # type: ignore[return-value]

    def get(self) -> list[str]:
        """Return the buffer in arrival order, oldest line first."""
        return list(reversed(self.raw()))

    def flush(self) -> None:
        """Discard everything buffered so far."""
        discarded = self._call("flush")
        self._emit("relay.flushed", discarded=discarded)

    def sort(self, comparator: Comparator = default_comparator) -> list[str]:
        """Return a sorted snapshot of the buffer; the buffer itself is unchanged.

        The default orders lines by the key before the first tab, which is what
        Hadoop does between the map and reduce stages. Pass a three-way
        comparator to mimic a custom shuffle. Lines with equal keys keep their
        arrival order, so a reducer sees values in the order they were written.
        """
        return sorted(self.get(), key=cmp_to_key(comparator))

    def forward(self, target: Recipient | None = None) -> Recipient:
        """Send every buffered line to ``target`` as a ``(relay, line)`` message.

        Messages are sent one per line in arrival order. Without a target a new
        queue is created and returned, so tests can drain it directly.
        """
        recipient: Recipient = queue.SimpleQueue() if target is None else target
        for line in self.get():
            recipient.put(RelayMessage(tag=RELAY_TAG, payload=line))
        return recipient

    def stop(self) -> None:
        # Stopping twice is a no-op; the worker exits once it reaches the stop request.
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
        self._finalizer.detach()
        self._mailbox.put(_Stop())
        self._worker.join()
        self._emit("relay.stopped")
        close = getattr(self._log, "close", None)
        if callable(close):
            close()

    def _call(self, op: Literal["raw", "flush"]) -> object:
        request = _Call(op=op, reply=queue.SimpleQueue())
        self._send(request)
        return self._await(request.reply)

    def _send(self, request: object) -> None:
        if self._stopped:
            raise RelayClosedError(f"relay '{self.name}' is stopped")
        self._mailbox.put(request)

    def _await(self, reply: queue.SimpleQueue[object]) -> object:
        while True:
            try:
                return reply.get(timeout=_POLL_SECONDS)
            except queue.Empty:
                if not self._worker.is_alive():
                    raise RelayClosedError(f"relay '{self.name}' stopped before replying") from None

    def _emit(self, message: str, **fields: object) -> None:
        self._log.emit(LogMessage.info(f"relay:{self.name}", message, **fields))


def create(options: RelayOptions | Mapping[str, Any] | None = None) -> Relay:
    return Relay.create(options)
