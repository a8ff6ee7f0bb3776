"""Tests for the dashboard session wiring."""

from __future__ import annotations

import asyncio
from typing import Any

from corner.core.clock import CivilClock
from corner.dashboard import Dashboard
from corner.store import CollectionStore
from corner.widgets import QuoteFetcher


def test_build_sync_uses_configured_intervals(store: CollectionStore, clock: CivilClock) -> None:
    dash = Dashboard.create(store, clock=clock)
    sync = dash.build_sync()

    assert {job.name: job.interval for job in sync.jobs} == {
        "clock": 15.0,
        "anchor": 1.0,
        "countdowns": 30.0,
    }

    sync.run_once()
    assert dash.clock_text == "IST • 12:00"
    assert dash.anchor_remaining is not None and dash.anchor_remaining.days == 253


def test_render_all_reloads_rows(store: CollectionStore, clock: CivilClock) -> None:
    dash = Dashboard.create(store, clock=clock)
    dash.countdowns.add("Trip", "2026-03-04")
    dash.render_all()
    assert [row.record.name for row in dash.countdown_rows] == ["Trip"]
    assert dash.snapshot()["countdowns"][0]["remaining"] == "2d 12h 00m"


def test_refresh_quote_keeps_latest(
    store: CollectionStore, clock: CivilClock, monkeypatch: Any
) -> None:
    monkeypatch.setattr(QuoteFetcher, "_get", lambda self, url: {"content": "Latest"})
    dash = Dashboard.create(store, clock=clock, quotes=QuoteFetcher(url="https://q.example"))

    result = asyncio.run(dash.refresh_quote())
    assert dash.quote == result
    assert result.text == "Latest"
