from __future__ import annotations

import json

import pytest

from arealog.core import diagnostics
from arealog.core.capture import TeeWriter
from arealog.testing import FailingSink, MemorySink


def test_disabled_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AREALOG_INTERNAL_LOGGING_ENABLED", raising=False)
    assert diagnostics.is_enabled() is False


def test_enabled_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AREALOG_INTERNAL_LOGGING_ENABLED", "true")
    assert diagnostics.is_enabled() is True


def test_warn_writes_json_line_to_stderr(
    internal_diagnostics: None, capsys: pytest.CaptureFixture[str]
) -> None:
    diagnostics.warn("capture", "tee downstream write failed", target="capture")

    err = capsys.readouterr().err.strip()
    payload = json.loads(err)
    assert payload["level"] == "WARN"
    assert payload["component"] == "capture"
    assert payload["message"] == "tee downstream write failed"
    assert payload["target"] == "capture"


def test_silent_when_disabled(capsys: pytest.CaptureFixture[str]) -> None:
    diagnostics.configure(enabled=False)
    diagnostics.warn("capture", "ignored")
    assert capsys.readouterr().err == ""


def test_tee_failure_reported(
    internal_diagnostics: None, capsys: pytest.CaptureFixture[str]
) -> None:
    tee = TeeWriter(MemorySink(), FailingSink(OSError("disk full")))
    assert tee.write(b"x\n") == 0

    payload = json.loads(capsys.readouterr().err.strip())
    assert payload["target"] == "capture"
    assert payload["reason"] == "OSError"
    assert payload["detail"] == "disk full"
