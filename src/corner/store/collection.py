"""
Persisted collections on top of a raw key-value backend.

Milestone
---------
This is the only durable boundary of the dashboard. Custom countdowns, notes
and the playlist id all go through :class:`CollectionStore`.

Responsibilities
----------------
- **Load**: parse the JSON array under a key into typed records. Fails soft:
  a missing key, unparseable JSON or a non-array value yields ``[]``; single
  entries that do not validate are dropped and logged. Never raises.
- **Save**: serialize the *whole* sequence and hand it to the backend in one
  write. There is no patching of individual records and no merge.
- **Clear**: drop a key entirely.
- **Scalars**: ``load_value`` / ``save_value`` for single JSON values.
- **Ids**: :func:`new_id` for record identifiers.

The store is the source of truth. Widgets reload, mutate and re-save on every
mutating operation instead of trusting a snapshot they held earlier.
"""

from __future__ import annotations

import json
import random
import secrets
import time
from collections.abc import Sequence
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ValidationError

from corner.core.settings import get_logger

from .backend import FileBackend, KeyValueBackend

logger = get_logger("corner.store")

M = TypeVar("M", bound=BaseModel)

# Logical store keys (one serialized value each).
COUNTDOWNS_KEY = "countdowns_v1"
NOTES_KEY = "notes_v1"
PLAYLIST_KEY = "playlist_v1"


def new_id() -> str:
    """Return an opaque record id, unique with overwhelming probability.

    Uses 8 bytes from the OS CSPRNG (16 hex chars). If the platform offers no
    randomness source, falls back to ``"<epoch-ms>_<pseudorandom hex>"``.
    """
    try:
        return secrets.token_hex(8)
    except NotImplementedError:
        return f"{time.time_ns() // 1_000_000}_{random.getrandbits(52):x}"


class CollectionStore:
    """Typed, fail-soft access to newest-first record collections."""

    _instance: ClassVar[CollectionStore | None] = None

    def __init__(self, backend: KeyValueBackend) -> None:
        self.backend = backend

    @classmethod
    def get_instance(cls) -> CollectionStore:
        """Accessor for the process-wide store backed by ``CORNER_DATA_DIR``."""
        if cls._instance is None:
            cls._instance = cls(FileBackend())
        return cls._instance

    # ------------------------------ Sequences -------------------------------

    def load(self, key: str, model: type[M]) -> list[M]:
        """Return the records stored under ``key`` (``[]`` on any read problem)."""
        raw = self._read_json(key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning(
                "Store key %r holds %s, not a list; treating as empty", key, type(raw).__name__
            )
            return []

        items: list[M] = []
        for idx, entry in enumerate(raw):
            try:
                items.append(model.model_validate(entry))
            except ValidationError as exc:
                logger.warning(
                    "Dropping invalid entry %d under %r (%d errors)", idx, key, exc.error_count()
                )
        return items

    def save(self, key: str, items: Sequence[BaseModel]) -> None:
        """Replace the whole collection under ``key`` with ``items``."""
        payload = [item.model_dump(mode="json") for item in items]
        self.backend.write(key, json.dumps(payload, ensure_ascii=False))

    def clear(self, key: str) -> None:
        """Discard the collection (subsequent loads return ``[]``)."""
        self.backend.delete(key)

    # ------------------------------- Scalars --------------------------------

    def load_value(self, key: str, default: str) -> str:
        """Return the string stored under ``key`` or ``default``."""
        raw = self._read_json(key)
        if isinstance(raw, str) and raw:
            return raw
        return default

    def save_value(self, key: str, value: str) -> None:
        self.backend.write(key, json.dumps(value, ensure_ascii=False))

    # ------------------------------- Helpers --------------------------------

    def _read_json(self, key: str) -> Any:
        text = self.backend.read(key)
        if text is None or not text.strip():
            return None
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError):
            logger.warning("Store key %r is not valid JSON; treating as empty", key)
            return None


def get_store() -> CollectionStore:
    return CollectionStore.get_instance()


__all__ = [
    "COUNTDOWNS_KEY",
    "CollectionStore",
    "NOTES_KEY",
    "PLAYLIST_KEY",
    "get_store",
    "new_id",
]
