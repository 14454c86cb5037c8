from __future__ import annotations


class DiscardSink:
    """Secondary sink that accepts every write and keeps nothing.

    The write path is identical to a real file sink, which keeps the
    WARN/ERROR/FATAL channels well-defined tee points for capture.
    """

    def write(self, data: bytes) -> int:
        return len(data)
