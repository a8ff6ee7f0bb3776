"""
Best-effort clipboard copy.

The primary path pipes the text into the first platform clipboard tool found
on ``PATH``. When none is installed, or it fails, the text is sent to the
terminal as an OSC 52 escape sequence, which most modern terminal emulators
(and tmux with ``set-clipboard on``) turn into a clipboard write.

Both paths report the same outcome. Callers get one boolean and show the same
"Copied" notice either way.
"""

from __future__ import annotations

import base64
import shutil
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from corner.core.settings import get_logger

logger = get_logger("corner.widgets.clipboard")

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def _find_command(candidates: Sequence[tuple[str, ...]]) -> list[str] | None:
    for argv in candidates:
        exe = shutil.which(argv[0])
        if exe:
            return [exe, *argv[1:]]
    return None


def _copy_with_command(text: str, candidates: Sequence[tuple[str, ...]]) -> bool:
    argv = _find_command(candidates)
    if argv is None:
        return False
    try:
        subprocess.run(argv, input=text.encode("utf-8"), check=True, timeout=3)
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Clipboard command %s failed: %s", argv[0], exc)
        return False
    return True


def _copy_with_osc52(text: str, stream: TextIO) -> bool:
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    try:
        stream.write(f"\x1b]52;c;{encoded}\x07")
        stream.flush()
    except (OSError, ValueError) as exc:
        logger.debug("OSC 52 clipboard write failed: %s", exc)
        return False
    return True


def copy_text(
    text: str,
    *,
    stream: TextIO | None = None,
    commands: Sequence[tuple[str, ...]] = CLIPBOARD_COMMANDS,
) -> bool:
    """Copy ``text`` to the clipboard; True if either path accepted it."""
    if _copy_with_command(text, commands):
        return True
    return _copy_with_osc52(text, stream if stream is not None else sys.stdout)


__all__ = ["CLIPBOARD_COMMANDS", "copy_text"]
