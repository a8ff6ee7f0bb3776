"""Tests for the best-effort clipboard copy."""

from __future__ import annotations

import base64
import io
import subprocess
from typing import Any

from corner.widgets import clipboard
from corner.widgets.clipboard import copy_text


def test_osc52_fallback_without_commands() -> None:
    stream = io.StringIO()
    assert copy_text("hello ✓", stream=stream, commands=()) is True

    payload = base64.b64encode("hello ✓".encode()).decode("ascii")
    assert stream.getvalue() == f"\x1b]52;c;{payload}\x07"


def test_platform_command_is_preferred(monkeypatch: Any) -> None:
    calls: list[tuple[list[str], bytes]] = []

    def fake_run(argv: list[str], *, input: bytes, check: bool, timeout: float) -> Any:
        calls.append((argv, input))
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    stream = io.StringIO()

    assert copy_text("quote", stream=stream, commands=(("xclip", "-selection", "clipboard"),))
    assert calls == [(["/usr/bin/xclip", "-selection", "clipboard"], b"quote")]
    assert stream.getvalue() == ""


def test_failing_command_falls_back_to_osc52(monkeypatch: Any) -> None:
    def failing_run(argv: list[str], **_: Any) -> Any:
        raise subprocess.CalledProcessError(1, argv)

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(clipboard.subprocess, "run", failing_run)
    stream = io.StringIO()

    assert copy_text("x", stream=stream, commands=(("pbcopy",),)) is True
    assert stream.getvalue().startswith("\x1b]52;c;")
