"""Persisted and ephemeral record contracts for the dashboard.

This module defines the Pydantic v2 models that cross the storage and HTTP
boundaries:

- `CountdownRecord`: a user-created one-off countdown (name + civil date).
- `NoteRecord`     : one entry of the two-party note log (text + optional reply).
- `QuoteResult`    : the quote widget's current content, never persisted.

Notes
-----
- Records are written newest-first as a JSON array per store key; field
  names are the on-disk names, so renaming one is a schema change.
- Notes are never edited after creation. `NoteRecord` is frozen to say so.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Author(str, Enum):
    """The two fixed parties of the note log."""

    KUNJUS = "kunjus"
    ME = "me"

    @property
    def counterpart(self) -> Author:
        return Author.ME if self is Author.KUNJUS else Author.KUNJUS


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


class CountdownRecord(BaseModel):
    """A saved custom countdown targeting civil midnight of `date`."""

    id: str = Field(..., min_length=1, description="Opaque unique id.")
    name: str = Field(..., min_length=1, description="Event name (trimmed).")
    date: dt.date = Field(..., description="Target calendar date; midnight in the civil zone.")
    created_at: dt.datetime = Field(default_factory=_utc_now)


class NoteRecord(BaseModel):
    """A note written by `author`, optionally paired with the other party's reply."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    author: Author
    text: str = Field(..., min_length=1)
    reply: str = ""
    created_at: dt.datetime = Field(default_factory=_utc_now)


class QuoteResult(BaseModel):
    """Quote widget content; an empty `source_label` marks the offline pool."""

    text: str
    attribution: str
    source_label: str = ""

    @property
    def is_offline(self) -> bool:
        return not self.source_label

    def meta_line(self) -> str:
        """Attribution line as shown under the quote: ``"— Author • Source"``."""
        suffix = f" • {self.source_label}" if self.source_label else ""
        return f"— {self.attribution}{suffix}"


__all__ = ["Author", "CountdownRecord", "NoteRecord", "QuoteResult"]
