from __future__ import annotations

import sys
from typing import BinaryIO


class ConsoleSink:
    """Writes rendered lines to stdout (or any binary stream).

    - One ``write`` call per line so lines from different loggers interleave
      only at line boundaries on an append-safe stream
    - The stream is resolved per call when none is given, so redirected
      ``sys.stdout`` (e.g. pytest capture) is honored
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        if self._stream is not None:
            return self._stream
        return sys.stdout.buffer

    def write(self, data: bytes) -> int:
        stream = self.stream
        written = stream.write(data)
        stream.flush()
        return len(data) if written is None else written
