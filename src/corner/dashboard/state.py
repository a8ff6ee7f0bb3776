"""
Dashboard state: the widgets wired together, plus their latest rendered values.

:class:`Dashboard` owns one instance of every widget and keeps the most recent
output of each periodic job (clock text, annual countdown, custom countdown
rows, quote). :meth:`Dashboard.build_sync` registers the three refresh methods
with a :class:`RenderSync` at the configured intervals.

The quote is fetched asynchronously. A second request may start before the
first finishes; whichever resolves last is what stays displayed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from corner.core.clock import CivilClock
from corner.core.contracts import QuoteResult
from corner.core.countdown import AnnualAnchor, AnnualCountdown, Remaining
from corner.core.settings import Settings, load_settings
from corner.dashboard.sync import RenderSync
from corner.store import CollectionStore
from corner.widgets import CountdownRow, CountdownSet, NoteLog, PlaylistSetting, QuoteFetcher


@dataclass
class Dashboard:
    """All widgets of one dashboard session."""

    clock: CivilClock
    anniversary: AnnualCountdown
    countdowns: CountdownSet
    notes: NoteLog
    playlist: PlaylistSetting
    quotes: QuoteFetcher
    settings: Settings = field(default_factory=load_settings)

    clock_text: str = ""
    anchor_remaining: Remaining | None = None
    countdown_rows: list[CountdownRow] = field(default_factory=list)
    quote: QuoteResult | None = None

    @classmethod
    def create(
        cls,
        store: CollectionStore,
        *,
        clock: CivilClock | None = None,
        quotes: QuoteFetcher | None = None,
        settings: Settings | None = None,
    ) -> Dashboard:
        cfg = settings or load_settings()
        civil = clock or CivilClock(cfg.timezone, label=cfg.tz_label)
        return cls(
            clock=civil,
            anniversary=AnnualCountdown(
                AnnualAnchor(cfg.anchor_month, cfg.anchor_day), label=cfg.anchor_label
            ),
            countdowns=CountdownSet(store, civil),
            notes=NoteLog(store),
            playlist=PlaylistSetting(store, default_id=cfg.default_playlist_id),
            quotes=quotes or QuoteFetcher(cfg.quote_url, cfg.quote_timeout_seconds),
            settings=cfg,
        )

    # ----------------------------- Refreshers ------------------------------

    def refresh_clock(self) -> str:
        self.clock_text = self.clock.clock_label()
        return self.clock_text

    def refresh_anchor(self) -> Remaining:
        self.anchor_remaining = self.anniversary.tick(self.clock.now())
        return self.anchor_remaining

    def refresh_countdowns(self) -> list[CountdownRow]:
        self.countdown_rows = self.countdowns.tick(self.clock.now())
        return self.countdown_rows

    def render_all(self) -> None:
        """Full render: reload countdown rows from the store, refresh the rest."""
        self.refresh_clock()
        self.refresh_anchor()
        self.countdown_rows = self.countdowns.render(self.clock.now())

    async def refresh_quote(self) -> QuoteResult:
        result = await self.quotes.fetch_async()
        self.quote = result
        return result

    def build_sync(self) -> RenderSync:
        sync = RenderSync()
        sync.add("clock", self.settings.clock_interval, self.refresh_clock)
        sync.add("anchor", self.settings.anchor_interval, self.refresh_anchor)
        sync.add("countdowns", self.settings.countdown_interval, self.refresh_countdowns)
        return sync

    # ------------------------------ Snapshot -------------------------------

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready view of the current state (used by the HTTP API)."""
        rem = self.anchor_remaining
        target = self.anniversary.target
        return {
            "clock": self.clock_text,
            "timezone": str(self.clock.zone),
            "anchor": {
                "label": self.anniversary.label,
                "target": target.isoformat() if target else None,
                "days": rem.days if rem else None,
                "hours": rem.hours if rem else None,
                "minutes": rem.minutes if rem else None,
                "seconds": rem.seconds if rem else None,
            },
            "countdowns": [
                {
                    "id": row.id,
                    "name": row.record.name,
                    "date": row.record.date.isoformat(),
                    "remaining": row.label,
                    "done": row.is_done,
                }
                for row in self.countdown_rows
            ],
            "notes_count": self.notes.count(),
            "playlist_id": self.playlist.load(),
        }


__all__ = ["Dashboard"]
