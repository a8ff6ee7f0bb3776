"""
Recurring annual countdown and remaining-time arithmetic.

An :class:`AnnualAnchor` is a yearly (month, day) event at civil midnight,
e.g. a birthday on Nov 10. :func:`next_occurrence` returns the nearest such
midnight strictly after "now"; at exactly the anchor midnight the event counts
as started, so the following year's occurrence is returned.

:func:`remaining` turns the gap between two instants into whole days, hours,
minutes and seconds. It floors to whole seconds and never goes negative.

:class:`AnnualCountdown` is the stateful wrapper the render loop ticks every
second. It re-derives the target on each tick so that a year rollover during
a long-running session is picked up without a restart.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import UTC, date, datetime, time

_SECONDS_PER_DAY = 86_400
_MAX_YEAR_SEARCH = 8


@dataclass(frozen=True, slots=True)
class AnnualAnchor:
    """A yearly recurring (month, day) at civil midnight."""

    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Anchor month out of range: {self.month}")
        # Leap year 2000 so that Feb 29 is accepted.
        last_day = calendar.monthrange(2000, self.month)[1]
        if not 1 <= self.day <= last_day:
            raise ValueError(f"Anchor day out of range for month {self.month}: {self.day}")

    def in_year(self, year: int) -> date | None:
        """Return the anchor date in ``year``, or None if it does not exist (Feb 29)."""
        if self.day > calendar.monthrange(year, self.month)[1]:
            return None
        return date(year, self.month, self.day)


@dataclass(frozen=True, slots=True)
class Remaining:
    """Non-negative countdown split into calendar-free units."""

    total_seconds: int
    days: int
    hours: int
    minutes: int
    seconds: int

    @property
    def is_done(self) -> bool:
        return self.total_seconds == 0

    @classmethod
    def from_seconds(cls, total: int) -> Remaining:
        total = max(0, total)
        return cls(
            total_seconds=total,
            days=total // _SECONDS_PER_DAY,
            hours=(total % _SECONDS_PER_DAY) // 3600,
            minutes=(total % 3600) // 60,
            seconds=total % 60,
        )


def next_occurrence(anchor: AnnualAnchor, now: datetime) -> datetime:
    """Return the first civil midnight matching ``anchor`` strictly after ``now``.

    Parameters
    ----------
    anchor:
        The recurring month/day.
    now:
        An aware instant in the civil zone (see :class:`CivilClock`). Its
        ``tzinfo`` is the zone the midnight is built in.

    Notes
    -----
    A Feb 29 anchor skips years in which the date does not exist.
    """
    if now.tzinfo is None:
        raise ValueError("next_occurrence() requires a timezone-aware 'now'")

    for year in range(now.year, now.year + _MAX_YEAR_SEARCH + 1):
        day = anchor.in_year(year)
        if day is None:
            continue
        target = datetime.combine(day, time.min, tzinfo=now.tzinfo)
        if target.astimezone(UTC) > now.astimezone(UTC):
            return target
    raise RuntimeError(f"No occurrence of {anchor} found after {now.isoformat()}")


def remaining(target: datetime, now: datetime) -> Remaining:
    """Return the whole-second gap from ``now`` to ``target``, clamped at zero."""
    # Same-zone aware subtraction is wall-clock based; go through UTC.
    delta = target.astimezone(UTC) - now.astimezone(UTC)
    # Integer arithmetic on microseconds keeps the floor exact.
    micros = (delta.days * _SECONDS_PER_DAY + delta.seconds) * 1_000_000 + delta.microseconds
    return Remaining.from_seconds(micros // 1_000_000)


def format_remaining(rem: Remaining) -> str:
    """Compact label used by the custom countdown list: ``"2d 03h 04m"``."""
    return f"{rem.days}d {rem.hours:02d}h {rem.minutes:02d}m"


class AnnualCountdown:
    """Live countdown to the next occurrence of an :class:`AnnualAnchor`."""

    def __init__(self, anchor: AnnualAnchor, label: str = "") -> None:
        self.anchor = anchor
        self.label = label
        self.target: datetime | None = None

    def tick(self, now: datetime) -> Remaining:
        """Refresh the target (picking up year rollovers) and return the gap."""
        nxt = next_occurrence(self.anchor, now)
        if self.target is None or nxt != self.target:
            self.target = nxt
        return remaining(self.target, now)


__all__ = [
    "AnnualAnchor",
    "AnnualCountdown",
    "Remaining",
    "format_remaining",
    "next_occurrence",
    "remaining",
]
