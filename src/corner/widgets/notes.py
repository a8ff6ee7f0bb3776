"""
Two-party note log.

Two fixed parties share one log. Each entry has a primary ``text`` written by
the *author* and an optional ``reply`` from the other party, fixed at creation
time. Entries are only ever added (newest first) or deleted; there is no edit.

The selected author is session state. It is not persisted and starts at the
configured default party. :meth:`NoteLog.add` takes the author as an explicit
keyword and falls back to the session context, so callers that already know
who is writing never depend on hidden state.
"""

from __future__ import annotations

from corner.core.contracts import Author, NoteRecord, Notice
from corner.core.result import Result, err, ok
from corner.core.settings import get_logger
from corner.store import NOTES_KEY, CollectionStore, new_id

logger = get_logger("corner.widgets.notes")


class NoteLog:
    """Add, list and delete two-party notes backed by the local store."""

    def __init__(
        self,
        store: CollectionStore,
        *,
        default_author: Author = Author.KUNJUS,
        key: str = NOTES_KEY,
    ) -> None:
        self.store = store
        self.key = key
        self._author = default_author

    @property
    def author(self) -> Author:
        """Party currently selected to write the next note."""
        return self._author

    def set_author(self, author: Author | str) -> Author:
        self._author = Author(author)
        return self._author

    def notes(self) -> list[NoteRecord]:
        """All notes, newest first, freshly read from the store."""
        return self.store.load(self.key, NoteRecord)

    def count(self) -> int:
        return len(self.notes())

    def add(
        self,
        text: str,
        reply: str | None = None,
        *,
        author: Author | str | None = None,
    ) -> Result[NoteRecord, Notice]:
        """Prepend a note by ``author`` (default: the session author)."""
        clean_text = (text or "").strip()
        if not clean_text:
            return err(Notice.MISSING_TEXT)

        note = NoteRecord(
            id=new_id(),
            author=Author(author) if author is not None else self._author,
            text=clean_text,
            reply=(reply or "").strip(),
        )
        items = self.notes()
        items.insert(0, note)
        self.store.save(self.key, items)
        logger.debug("Added note %s by %s", note.id, note.author.value)
        return ok(note)

    def remove(self, note_id: str) -> bool:
        """Delete the note with ``note_id``; unknown ids change nothing."""
        items = self.notes()
        kept = [item for item in items if item.id != note_id]
        if len(kept) == len(items):
            return False
        self.store.save(self.key, kept)
        return True

    def clear_all(self) -> None:
        self.store.clear(self.key)


__all__ = ["NoteLog"]
