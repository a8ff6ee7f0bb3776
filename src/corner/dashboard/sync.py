"""
Periodic render loops.

The dashboard recomputes three things at three different rates:

- the sidebar clock (coarse, every ~15 s),
- the annual countdown (every second, including the year-rollover check),
- the custom countdown list (every ~30 s; minute precision is enough).

:class:`RenderSync` runs any number of such named jobs on one asyncio event
loop. Each job fires immediately, then sleeps for its own interval. Jobs are
independent: a slow or failing job never delays or stops the others. A job
that raises is logged and keeps its schedule, and so does one whose
``on_tick`` hook (the redraw) raises.

Loops live as long as :meth:`RenderSync.run` does; there is no persisted
timer state and nothing resumes across restarts.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

from corner.core.settings import get_logger

logger = get_logger("corner.dashboard.sync")


@dataclass(frozen=True, slots=True)
class PeriodicJob:
    name: str
    interval: float
    callback: Callable[[], object]


class RenderSync:
    """Drive independent periodic recomputations on one event loop."""

    def __init__(self) -> None:
        self._jobs: list[PeriodicJob] = []
        self.ticks: dict[str, int] = {}

    def add(self, name: str, interval: float, callback: Callable[[], object]) -> PeriodicJob:
        if interval <= 0:
            raise ValueError(f"Interval for job {name!r} must be positive, got {interval}")
        if name in self.ticks:
            raise ValueError(f"Duplicate job name: {name!r}")
        job = PeriodicJob(name=name, interval=interval, callback=callback)
        self._jobs.append(job)
        self.ticks[name] = 0
        return job

    @property
    def jobs(self) -> tuple[PeriodicJob, ...]:
        return tuple(self._jobs)

    def _fire(self, job: PeriodicJob) -> None:
        try:
            job.callback()
        except Exception:
            logger.exception("Render job %r failed", job.name)
        self.ticks[job.name] += 1

    def run_once(self) -> None:
        """Run every job exactly once, in registration order."""
        for job in self._jobs:
            self._fire(job)

    async def _loop(self, job: PeriodicJob, on_tick: Callable[[str], object] | None) -> None:
        while True:
            self._fire(job)
            if on_tick is not None:
                try:
                    on_tick(job.name)
                except Exception:
                    logger.exception("Tick hook failed after job %r", job.name)
            await asyncio.sleep(job.interval)

    async def run(
        self,
        *,
        on_tick: Callable[[str], object] | None = None,
        stop: asyncio.Event | None = None,
    ) -> None:
        """Run all jobs until ``stop`` is set (or forever if it is None)."""
        tasks = [
            asyncio.create_task(self._loop(job, on_tick), name=job.name) for job in self._jobs
        ]
        try:
            if stop is None:
                await asyncio.gather(*tasks)
            else:
                await stop.wait()
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)


__all__ = ["PeriodicJob", "RenderSync"]
