from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from . import Writer


class FanOutWriter:
    """Forward each write to every downstream writer in order.

    Stops at the first writer that raises and propagates the error, like a
    plain multi-writer. Returns the byte count of the last writer.
    """

    def __init__(self, *writers: Writer) -> None:
        self._writers: tuple[Writer, ...] = writers

    @property
    def writers(self) -> tuple[Writer, ...]:
        return self._writers

    def write(self, data: bytes) -> int:
        written = len(data)
        for writer in self._writers:
            written = writer.write(data)
        return written
