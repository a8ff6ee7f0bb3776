"""Local durable store: raw backends plus typed, fail-soft collections."""

from __future__ import annotations

from .backend import FileBackend, KeyValueBackend, MemoryBackend
from .collection import (
    COUNTDOWNS_KEY,
    NOTES_KEY,
    PLAYLIST_KEY,
    CollectionStore,
    get_store,
    new_id,
)

__all__ = [
    "COUNTDOWNS_KEY",
    "CollectionStore",
    "FileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "NOTES_KEY",
    "PLAYLIST_KEY",
    "get_store",
    "new_id",
]
