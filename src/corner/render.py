"""
View helpers shared by the terminal and HTTP surfaces.

Note panels
-----------
Every note renders as a fixed pair of labeled panels, one per party. The
author of the primary ``text`` always comes first and the counterpart (whose
panel holds ``reply``) second, whichever party wrote it. Empty panel text is
shown as a dash.

Escaping
--------
Stored free text is user input. The terminal surface passes it through
``rich.markup.escape`` and the HTML fragments below through ``html.escape``
so that brackets or angle brackets typed into a note are displayed, never
interpreted.
"""

from __future__ import annotations

import html
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from corner.core.clock import CivilClock
from corner.core.contracts import Author, NoteRecord
from corner.core.settings import load_settings
from corner.widgets.countdowns import CountdownRow

EMPTY_PANEL = "—"


@dataclass(frozen=True, slots=True)
class NotePanel:
    author: Author
    title: str
    text: str

    @property
    def is_empty(self) -> bool:
        return not self.text


def party_labels() -> dict[Author, str]:
    """Display names of the two parties, from configuration."""
    cfg = load_settings()
    return {Author.KUNJUS: cfg.party_a_label, Author.ME: cfg.party_b_label}


def note_panels(
    note: NoteRecord,
    labels: Mapping[Author, str] | None = None,
) -> tuple[NotePanel, NotePanel]:
    """Return ``(author panel, counterpart panel)`` for ``note``."""
    names = labels or party_labels()
    first = NotePanel(author=note.author, title=names[note.author], text=note.text)
    other = note.author.counterpart
    second = NotePanel(author=other, title=names[other], text=note.reply)
    return first, second


# --------------------------------------------------------------------------- #
# HTML fragments
# --------------------------------------------------------------------------- #


def _panel_html(panel: NotePanel) -> str:
    css = "bubble me" if panel.author is Author.ME else "bubble"
    body = html.escape(panel.text) if panel.text else f'<span class="muted">{EMPTY_PANEL}</span>'
    return (
        f'<div class="{css}">'
        f'<div class="bubble-h">{html.escape(panel.title)}</div>'
        f'<div class="bubble-t">{body}</div>'
        "</div>"
    )


def notes_html(
    notes: Sequence[NoteRecord],
    clock: CivilClock,
    labels: Mapping[Author, str] | None = None,
) -> str:
    """Notes list as escaped HTML, newest first, with civil-zone timestamps."""
    if not notes:
        return '<div class="micro-note">No notes yet. Add one on the left.</div>'
    parts: list[str] = []
    for note in notes:
        first, second = note_panels(note, labels)
        stamp = html.escape(f"{clock.format_timestamp(note.created_at)} • {clock.label}")
        parts.append(
            f'<div class="note" data-id="{html.escape(note.id)}">'
            f'<div class="note-time">{stamp}</div>'
            f'<div class="pair">{_panel_html(first)}{_panel_html(second)}</div>'
            "</div>"
        )
    return "\n".join(parts)


def countdowns_html(rows: Sequence[CountdownRow], clock: CivilClock) -> str:
    """Custom countdown list as escaped HTML."""
    if not rows:
        return '<div class="micro-note">No saved countdowns yet. Add one above.</div>'
    parts: list[str] = []
    for row in rows:
        sub = html.escape(f"{row.record.date.isoformat()} • {clock.label} midnight")
        parts.append(
            f'<div class="cd-item" data-id="{html.escape(row.id)}">'
            f'<div class="cd-name">{html.escape(row.record.name)}</div>'
            f'<div class="cd-sub">{sub}</div>'
            f'<div class="cd-time">{html.escape(row.label)}</div>'
            "</div>"
        )
    return "\n".join(parts)


__all__ = [
    "EMPTY_PANEL",
    "NotePanel",
    "countdowns_html",
    "note_panels",
    "notes_html",
    "party_labels",
]
