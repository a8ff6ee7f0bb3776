"""User-facing notices.

Every dashboard action ends with a short, self-dismissing message. Failures
are returned as `Err(Notice.X)` and leave the store untouched; successes are
acknowledged with the matching `*_ADDED`/`*_DELETED`/`*_CLEARED` member.
"""

from __future__ import annotations

from enum import Enum


class Notice(str, Enum):
    MISSING_NAME = "Please enter an event name"
    MISSING_DATE = "Please pick a date"
    MISSING_TEXT = "Write something first"
    MISSING_PLAYLIST = "Enter a playlist ID or URL"

    COUNTDOWN_ADDED = "Countdown added"
    COUNTDOWN_DELETED = "Countdown deleted"
    COUNTDOWNS_CLEARED = "Saved countdowns cleared"
    NOTE_ADDED = "Note added"
    NOTE_DELETED = "Note deleted"
    NOTES_CLEARED = "All notes cleared"
    PLAYLIST_SAVED = "Playlist saved"
    PLAYLIST_RESET = "Playlist reset"
    COPIED = "Copied ✓"

    @property
    def is_failure(self) -> bool:
        return self.name.startswith("MISSING_")


__all__ = ["Notice"]
