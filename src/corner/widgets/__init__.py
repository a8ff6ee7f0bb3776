"""Dashboard widgets built on the civil clock and the local store."""

from __future__ import annotations

from .countdowns import CountdownRow, CountdownSet
from .notes import NoteLog
from .playlist import PlaylistSetting, embed_url, extract_playlist_id
from .quotes import QuoteFetcher

__all__ = [
    "CountdownRow",
    "CountdownSet",
    "NoteLog",
    "PlaylistSetting",
    "QuoteFetcher",
    "embed_url",
    "extract_playlist_id",
]
