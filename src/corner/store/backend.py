"""
Raw key-value backends for the local store.

A backend only moves text: one serialized value per key. Parsing, model
validation and the fail-soft policy live one level up in
:class:`corner.store.collection.CollectionStore`.

Two implementations are provided:

- :class:`MemoryBackend`: a dict with a revision counter. Used by tests and by
  throwaway sessions (``corner watch --ephemeral``).
- :class:`FileBackend`: one ``<key>.json`` file per key under a data
  directory (``CORNER_DATA_DIR`` or ``.corner/``). Writes go to a temporary
  file in the same directory and are moved into place with ``os.replace``,
  so a reader sees either the old value or the new one, never a torn write.
  Concurrent writers are last-writer-wins.

Keys
----
Keys double as filenames, so they are restricted to ``[A-Za-z0-9_.-]`` and
may not start with a dot.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from corner.core.settings import get_logger, load_settings

logger = get_logger("corner.store.backend")

_KEY_RE = re.compile(r"^[A-Za-z0-9_-][A-Za-z0-9_.-]*$")


def check_key(key: str) -> str:
    """Return ``key`` unchanged or raise ``ValueError`` if it is not storable."""
    if not _KEY_RE.match(key):
        raise ValueError(f"Invalid store key: {key!r}")
    return key


@runtime_checkable
class KeyValueBackend(Protocol):
    """Minimal durable mapping from a store key to one serialized value."""

    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryBackend:
    """
    In-process backend with a revision counter.

    Attributes
    ----------
    _data : dict[str, str]
        Serialized values by key.
    _rev : int
        Monotonically increasing revision counter (bumps on every mutation).
    """

    __slots__ = ("_data", "_rev")

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._rev: int = 0

    def read(self, key: str) -> str | None:
        return self._data.get(check_key(key))

    def write(self, key: str, value: str) -> None:
        self._data[check_key(key)] = value
        self._rev += 1

    def delete(self, key: str) -> None:
        if self._data.pop(check_key(key), None) is not None:
            self._rev += 1

    @property
    def revision(self) -> int:
        return self._rev

    def keys(self) -> tuple[str, ...]:
        """Return the current keys as a sorted tuple (stable for tests)."""
        return tuple(sorted(self._data))


def _default_dir() -> Path:
    """Return the default base directory for store files."""
    return load_settings().data_dir


class FileBackend:
    """Persist each key as ``<base_dir>/<key>.json``."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir: Path = base_dir if base_dir is not None else _default_dir()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self.base_dir / f"{check_key(key)}.json"

    def read(self, key: str) -> str | None:
        """Return the stored text, or None if it is missing or unreadable."""
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Store file %s is unreadable; treating as empty: %s", path.name, exc)
            return None

    def write(self, key: str, value: str) -> None:
        path = self.path_for(key)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.base_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


__all__ = ["FileBackend", "KeyValueBackend", "MemoryBackend", "check_key"]
