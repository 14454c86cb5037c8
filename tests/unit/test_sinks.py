from __future__ import annotations

import io

import pytest

from arealog.plugins.sinks import ConsoleSink, DiscardSink, FanOutWriter, Writer
from arealog.testing import FailingSink, MemorySink


def test_builtin_sinks_satisfy_writer_protocol() -> None:
    sinks = (ConsoleSink(io.BytesIO()), DiscardSink(), FanOutWriter(), MemorySink())
    for sink in sinks:
        assert isinstance(sink, Writer)


def test_discard_sink_reports_full_write() -> None:
    assert DiscardSink().write(b"abc") == 3


def test_console_sink_defaults_to_stdout(
    capsysbinary: pytest.CaptureFixture[bytes],
) -> None:
    ConsoleSink().write(b"hello\n")
    assert capsysbinary.readouterr().out == b"hello\n"


def test_fan_out_writes_in_order() -> None:
    a, b = MemorySink(), MemorySink()
    writer = FanOutWriter(a, b)
    assert writer.write(b"x") == 1
    assert a.chunks == b.chunks == [b"x"]
    assert writer.writers == (a, b)


def test_fan_out_stops_at_first_failure() -> None:
    after = MemorySink()
    writer = FanOutWriter(FailingSink(OSError("closed")), after)
    with pytest.raises(OSError, match="closed"):
        writer.write(b"x")
    assert after.chunks == []
