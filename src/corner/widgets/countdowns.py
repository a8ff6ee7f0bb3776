"""
Custom countdown list: user-created one-off targets.

Each :class:`CountdownRecord` names a calendar date; its target is civil
midnight at the start of that date. The set keeps a list of
:class:`CountdownRow` view-models produced by the last full :meth:`render`:

- ``add`` / ``remove`` / ``clear_all`` reload from the store, persist the whole
  updated sequence once, then re-render.
- ``tick`` only refreshes the remaining-time label of the rows it already
  holds. It never reads the store, which keeps the 30 s loop cheap.

A target that has passed shows the terminal label ``"done"`` instead of a
negative duration.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from corner.core.clock import CivilClock
from corner.core.contracts import CountdownRecord, Notice
from corner.core.countdown import Remaining, format_remaining, remaining
from corner.core.result import Result, err, ok
from corner.core.settings import get_logger
from corner.store import COUNTDOWNS_KEY, CollectionStore, new_id

logger = get_logger("corner.widgets.countdowns")

DONE_LABEL = "done"
PENDING_LABEL = "—"


@dataclass(slots=True)
class CountdownRow:
    """One rendered line of the countdown list."""

    record: CountdownRecord
    target: dt.datetime
    remaining: Remaining | None = None
    label: str = PENDING_LABEL

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def is_done(self) -> bool:
        return self.label == DONE_LABEL


def parse_target_date(value: str | dt.date | None) -> dt.date | None:
    """Accept a ``date`` or a ``YYYY-MM-DD`` string; return None when unusable."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = (value or "").strip()
    if not text:
        return None
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        return None


class CountdownSet:
    """Create, delete and tick the saved custom countdowns."""

    def __init__(
        self,
        store: CollectionStore,
        clock: CivilClock,
        *,
        key: str = COUNTDOWNS_KEY,
    ) -> None:
        self.store = store
        self.clock = clock
        self.key = key
        self._rows: list[CountdownRow] = []

    @property
    def rows(self) -> list[CountdownRow]:
        return list(self._rows)

    def records(self) -> list[CountdownRecord]:
        """Current persisted records, newest first."""
        return self.store.load(self.key, CountdownRecord)

    # ------------------------------ Mutations -------------------------------

    def add(self, name: str, date: str | dt.date | None) -> Result[CountdownRecord, Notice]:
        """Validate, prepend and persist a new countdown."""
        clean_name = (name or "").strip()
        if not clean_name:
            return err(Notice.MISSING_NAME)
        target_date = parse_target_date(date)
        if target_date is None:
            return err(Notice.MISSING_DATE)

        record = CountdownRecord(id=new_id(), name=clean_name, date=target_date)
        items = self.records()
        items.insert(0, record)
        self.store.save(self.key, items)
        logger.debug("Added countdown %s (%s)", record.id, record.date.isoformat())

        self.render()
        return ok(record)

    def remove(self, record_id: str) -> bool:
        """Delete the countdown with ``record_id``; unknown ids change nothing."""
        items = self.records()
        kept = [item for item in items if item.id != record_id]
        removed = len(kept) != len(items)
        if removed:
            self.store.save(self.key, kept)
        self.render()
        return removed

    def clear_all(self) -> None:
        self.store.clear(self.key)
        self.render()

    # ------------------------------ Rendering -------------------------------

    def render(self, now: dt.datetime | None = None) -> list[CountdownRow]:
        """Rebuild every row from the store, then compute remaining times."""
        self._rows = [
            CountdownRow(record=item, target=self.clock.midnight(item.date))
            for item in self.records()
        ]
        return self.tick(now)

    def tick(self, now: dt.datetime | None = None) -> list[CountdownRow]:
        """Refresh remaining time on the rows of the last render."""
        current = now if now is not None else self.clock.now()
        for row in self._rows:
            rem = remaining(row.target, current)
            row.remaining = rem
            passed = row.target.timestamp() <= current.timestamp()
            row.label = DONE_LABEL if passed else format_remaining(rem)
        return self.rows


__all__ = ["CountdownRow", "CountdownSet", "DONE_LABEL", "parse_target_date"]
