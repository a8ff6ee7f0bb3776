"""
Civil clock: "now" in a fixed timezone, independent of the host setting.

Every countdown on the dashboard is anchored to a civil date (midnight in the
configured zone, IST by default). Comparing against the host's local time
would shift targets by hours for a viewer abroad, so all "now" values come
from :class:`CivilClock`, which converts the real UTC instant straight into
the civil zone with :mod:`zoneinfo`. There is no string round-trip and the
process ``TZ`` variable has no influence on the result.

The time source is injectable so tests can pin "now" to any instant.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime, time
from zoneinfo import ZoneInfo

from corner.core.settings import load_settings


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CivilClock:
    """Produce timezone-aware instants in one fixed civil timezone.

    Parameters
    ----------
    tz:
        IANA zone name. Defaults to ``settings.timezone``.
    label:
        Short human label for the zone (``"IST"``), used by the sidebar clock.
    source:
        Zero-argument callable returning an aware ``datetime``. Defaults to the
        real UTC clock.
    """

    __slots__ = ("_zone", "label", "_source")

    def __init__(
        self,
        tz: str | None = None,
        *,
        label: str | None = None,
        source: Callable[[], datetime] | None = None,
    ) -> None:
        cfg = load_settings()
        self._zone = ZoneInfo(tz or cfg.timezone)
        self.label = label if label is not None else cfg.tz_label
        self._source = source or _utc_now

    @property
    def zone(self) -> ZoneInfo:
        return self._zone

    def now(self) -> datetime:
        """Return the current instant expressed in the civil zone."""
        instant = self._source()
        if instant.tzinfo is None:
            raise ValueError("Clock source must return a timezone-aware datetime")
        return instant.astimezone(self._zone)

    def to_civil(self, instant: datetime) -> datetime:
        """Express an arbitrary aware instant in the civil zone."""
        return instant.astimezone(self._zone)

    def midnight(self, day: date) -> datetime:
        """Return civil midnight at the start of ``day``."""
        return datetime.combine(day, time.min, tzinfo=self._zone)

    def clock_label(self, now: datetime | None = None) -> str:
        """Sidebar clock text, e.g. ``"IST • 09:05"``."""
        current = self.to_civil(now) if now is not None else self.now()
        return f"{self.label} • {current:%H:%M}"

    def format_timestamp(self, instant: datetime) -> str:
        """Note timestamp in the civil zone, e.g. ``"10 Nov 2026, 09:15 AM"``."""
        return self.to_civil(instant).strftime("%d %b %Y, %I:%M %p")


__all__ = ["CivilClock"]
