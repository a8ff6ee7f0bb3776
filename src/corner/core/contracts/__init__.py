"""Record contracts shared by the store, widgets and surfaces."""

from __future__ import annotations

from .notices import Notice
from .records import Author, CountdownRecord, NoteRecord, QuoteResult

__all__ = ["Author", "CountdownRecord", "NoteRecord", "Notice", "QuoteResult"]
