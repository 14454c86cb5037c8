from __future__ import annotations

from typing import Protocol, runtime_checkable

from .console import ConsoleSink
from .discard import DiscardSink
from .fanout import FanOutWriter


@runtime_checkable
class Writer(Protocol):
    """Byte writer interface shared by every sink.

    A writer accepts one rendered line per call and returns the number of
    bytes written. Failures are raised as exceptions. Concurrent callers get
    no synchronization beyond what the implementation provides; sinks that
    share a stream should issue a single underlying write per line.
    """

    def write(self, data: bytes) -> int:  # noqa: D401
        """Write ``data`` and return the number of bytes accepted."""
        ...


__all__ = [
    "ConsoleSink",
    "DiscardSink",
    "FanOutWriter",
    "Writer",
]
