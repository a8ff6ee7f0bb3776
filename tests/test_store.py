"""
Tests for the local store (backends + typed collections).

Focus
-----
- Sequences round-trip in order through both backends.
- Loading is fail-soft: missing keys, corrupt JSON and wrong shapes read as
  an empty collection; single bad entries are dropped.
- File writes are atomic replacements that leave no temporary files behind.
- Record ids are unique, with a fallback when the OS has no randomness.
"""

from __future__ import annotations

import json
import secrets
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from corner.core.contracts import Author, CountdownRecord, NoteRecord
from corner.store import (
    COUNTDOWNS_KEY,
    NOTES_KEY,
    CollectionStore,
    FileBackend,
    KeyValueBackend,
    MemoryBackend,
    get_store,
    new_id,
)


def _countdowns() -> list[CountdownRecord]:
    return [
        CountdownRecord(id="c2", name="Trip", date=date(2026, 12, 24)),
        CountdownRecord(id="c1", name="Exam", date=date(2026, 5, 2)),
    ]


def test_backends_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(MemoryBackend(), KeyValueBackend)
    assert isinstance(FileBackend(tmp_path), KeyValueBackend)


def test_round_trip_keeps_order(store: CollectionStore) -> None:
    store.save(COUNTDOWNS_KEY, _countdowns())
    loaded = store.load(COUNTDOWNS_KEY, CountdownRecord)
    assert [c.id for c in loaded] == ["c2", "c1"]
    assert loaded[0].date == date(2026, 12, 24)


def test_file_backend_round_trip(tmp_path: Path) -> None:
    store = CollectionStore(FileBackend(tmp_path))
    note = NoteRecord(id="n1", author=Author.ME, text="hi", reply="hey")
    store.save(NOTES_KEY, [note])

    on_disk = json.loads((tmp_path / f"{NOTES_KEY}.json").read_text(encoding="utf-8"))
    assert on_disk[0]["author"] == "me"
    assert store.load(NOTES_KEY, NoteRecord) == [note]


def test_file_write_leaves_no_temp_files(tmp_path: Path) -> None:
    backend = FileBackend(tmp_path)
    backend.write("notes_v1", "[]")
    backend.write("notes_v1", '["x"]')
    assert sorted(p.name for p in tmp_path.iterdir()) == ["notes_v1.json"]
    assert backend.read("notes_v1") == '["x"]'


def test_file_delete_is_idempotent(tmp_path: Path) -> None:
    backend = FileBackend(tmp_path)
    backend.write("k", "1")
    backend.delete("k")
    backend.delete("k")
    assert backend.read("k") is None


def test_missing_key_loads_empty(store: CollectionStore) -> None:
    assert store.load(NOTES_KEY, NoteRecord) == []


UNUSABLE = ["{not json", '{"a": 1}', '"text"', "", "   "]


@pytest.mark.parametrize("raw", UNUSABLE)  # type: ignore[misc]
def test_unusable_values_load_empty(raw: str) -> None:
    store = CollectionStore(MemoryBackend({NOTES_KEY: raw}))
    assert store.load(NOTES_KEY, NoteRecord) == []


def test_invalid_entries_are_dropped() -> None:
    raw = json.dumps(
        [
            {"id": "n1", "author": "kunjus", "text": "ok"},
            {"id": "n2", "author": "stranger", "text": "who?"},
            "garbage",
            {"id": "n3", "author": "me", "text": ""},
        ]
    )
    store = CollectionStore(MemoryBackend({NOTES_KEY: raw}))
    assert [n.id for n in store.load(NOTES_KEY, NoteRecord)] == ["n1"]


def test_clear_removes_key(store: CollectionStore, backend: MemoryBackend) -> None:
    store.save(COUNTDOWNS_KEY, _countdowns())
    store.clear(COUNTDOWNS_KEY)
    assert backend.keys() == ()
    assert store.load(COUNTDOWNS_KEY, CountdownRecord) == []


def test_save_is_one_write(store: CollectionStore, backend: MemoryBackend) -> None:
    store.save(COUNTDOWNS_KEY, _countdowns())
    assert backend.revision == 1


def test_scalar_values(store: CollectionStore) -> None:
    assert store.load_value("playlist_v1", "PLdefault") == "PLdefault"
    store.save_value("playlist_v1", "PLother")
    assert store.load_value("playlist_v1", "PLdefault") == "PLother"


@pytest.mark.parametrize("key", ["", ".hidden", "../escape", "a/b", "sp ace"])  # type: ignore[misc]
def test_unsafe_keys_are_rejected(key: str) -> None:
    with pytest.raises(ValueError):
        MemoryBackend().write(key, "1")


def test_new_id_is_unique() -> None:
    ids = {new_id() for _ in range(500)}
    assert len(ids) == 500
    assert all(len(i) == 16 for i in ids)


def test_new_id_falls_back_without_os_randomness(monkeypatch: Any) -> None:
    def no_entropy(_: int) -> str:
        raise NotImplementedError

    monkeypatch.setattr(secrets, "token_hex", no_entropy)
    first, second = new_id(), new_id()
    assert "_" in first and first != second


def test_get_store_uses_configured_data_dir(tmp_path: Path) -> None:
    store = get_store()
    assert store is get_store()
    assert isinstance(store.backend, FileBackend)
    assert store.backend.base_dir == tmp_path / "data"


# --------------------------------------------------------------------------- #
# Byte-level corruption on disk
# --------------------------------------------------------------------------- #

CORRUPT_FILES = [
    b"\xff\xfe[garbage\x80",
    b"\x80\x81",
    ("[" * 100_000 + "]" * 100_000).encode("ascii"),
]


@pytest.mark.parametrize("payload", CORRUPT_FILES)  # type: ignore[misc]
def test_corrupt_file_loads_empty(tmp_path: Path, payload: bytes) -> None:
    (tmp_path / f"{NOTES_KEY}.json").write_bytes(payload)
    store = CollectionStore(FileBackend(tmp_path))

    assert store.load(NOTES_KEY, NoteRecord) == []
    assert store.load_value(NOTES_KEY, "fallback") == "fallback"


def test_corrupt_file_is_replaced_by_next_save(tmp_path: Path) -> None:
    (tmp_path / f"{NOTES_KEY}.json").write_bytes(b"\xff\xfe\x80")
    store = CollectionStore(FileBackend(tmp_path))
    note = NoteRecord(id="n1", author=Author.KUNJUS, text="fresh start")

    store.save(NOTES_KEY, [note])
    assert store.load(NOTES_KEY, NoteRecord) == [note]


def test_unreadable_path_reads_as_missing(tmp_path: Path) -> None:
    (tmp_path / f"{NOTES_KEY}.json").mkdir()
    assert FileBackend(tmp_path).read(NOTES_KEY) is None
