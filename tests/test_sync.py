"""
Tests for the periodic render loops.

Scenarios
---------
1. **Registration**: non-positive intervals and duplicate names are refused.
2. **Isolation**: a job that raises is logged and does not stop the others.
3. **Scheduling**: under `run()`, a fast job fires more often than a slow one
   and every task is cancelled once the stop event is set.
"""

from __future__ import annotations

import asyncio

import pytest

from corner.dashboard.sync import RenderSync


def test_add_validates_interval_and_name() -> None:
    sync = RenderSync()
    sync.add("clock", 15, lambda: None)
    with pytest.raises(ValueError):
        sync.add("clock", 15, lambda: None)
    with pytest.raises(ValueError):
        sync.add("bad", 0, lambda: None)
    assert [job.name for job in sync.jobs] == ["clock"]


def test_run_once_isolates_failures() -> None:
    seen: list[str] = []

    def broken() -> None:
        raise RuntimeError("render blew up")

    sync = RenderSync()
    sync.add("broken", 1, broken)
    sync.add("fine", 1, lambda: seen.append("fine"))
    sync.run_once()
    sync.run_once()

    assert seen == ["fine", "fine"]
    assert sync.ticks == {"broken": 2, "fine": 2}


def test_run_drives_independent_rates_until_stopped() -> None:
    async def scenario() -> RenderSync:
        sync = RenderSync()
        stop = asyncio.Event()
        sync.add("fast", 0.01, lambda: None)
        sync.add("slow", 10, lambda: None)

        def on_tick(name: str) -> None:
            if sync.ticks["fast"] >= 5:
                stop.set()

        await asyncio.wait_for(sync.run(on_tick=on_tick, stop=stop), timeout=5)
        return sync

    sync = asyncio.run(scenario())
    assert sync.ticks["fast"] >= 5
    assert sync.ticks["slow"] == 1


def test_failing_job_keeps_its_schedule() -> None:
    async def scenario() -> RenderSync:
        sync = RenderSync()
        stop = asyncio.Event()

        def broken() -> None:
            raise RuntimeError("nope")

        sync.add("broken", 0.01, broken)

        def on_tick(name: str) -> None:
            if sync.ticks["broken"] >= 3:
                stop.set()

        await asyncio.wait_for(sync.run(on_tick=on_tick, stop=stop), timeout=5)
        return sync

    assert asyncio.run(scenario()).ticks["broken"] >= 3


def test_failing_tick_hook_keeps_loops_running() -> None:
    """A redraw that raises is logged; every job keeps firing on schedule."""

    async def scenario() -> RenderSync:
        sync = RenderSync()
        stop = asyncio.Event()
        sync.add("fast", 0.01, lambda: None)

        def on_tick(name: str) -> None:
            if sync.ticks["fast"] >= 4:
                stop.set()
            raise RuntimeError("redraw failed")

        await asyncio.wait_for(sync.run(on_tick=on_tick, stop=stop), timeout=5)
        return sync

    assert asyncio.run(scenario()).ticks["fast"] >= 4
