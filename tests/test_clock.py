"""
Tests for the civil clock.

Focus
-----
"Now" must come out in the configured civil zone no matter what the host
believes its timezone is, and the derived labels must use that zone.
"""

from __future__ import annotations

import os
import time
from datetime import UTC, date, datetime, timedelta
from typing import Any

import pytest

from corner.core.clock import CivilClock


def test_now_is_expressed_in_civil_zone(clock: CivilClock) -> None:
    now = clock.now()
    assert now.utcoffset() == timedelta(hours=5, minutes=30)
    assert (now.hour, now.minute) == (12, 0)


def test_now_ignores_host_timezone(fixed_source: Any) -> None:
    """Changing the process `TZ` must not move civil "now"."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    original = os.environ.get("TZ")
    os.environ["TZ"] = "America/New_York"
    time.tzset()
    try:
        clock = CivilClock("Asia/Kolkata", source=fixed_source)
        assert clock.now().strftime("%Y-%m-%d %H:%M") == "2026-03-01 12:00"
    finally:
        if original is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = original
        time.tzset()


def test_naive_source_is_rejected() -> None:
    clock = CivilClock("Asia/Kolkata", source=lambda: datetime(2026, 1, 1))
    with pytest.raises(ValueError):
        clock.now()


def test_midnight_is_start_of_civil_day(clock: CivilClock) -> None:
    midnight = clock.midnight(date(2026, 11, 10))
    assert midnight.astimezone(UTC) == datetime(2026, 11, 9, 18, 30, tzinfo=UTC)


def test_labels_use_zone_label(clock: CivilClock) -> None:
    assert clock.clock_label() == "IST • 12:00"
    stamp = clock.format_timestamp(datetime(2026, 11, 10, 3, 45, tzinfo=UTC))
    assert stamp == "10 Nov 2026, 09:15 AM"


def test_defaults_come_from_settings(monkeypatch: Any) -> None:
    from corner.core.settings import load_settings

    monkeypatch.setenv("CORNER_TIMEZONE", "Europe/Paris")
    monkeypatch.setenv("CORNER_TZ_LABEL", "CET")
    load_settings.cache_clear()

    clock = CivilClock()
    assert str(clock.zone) == "Europe/Paris"
    assert clock.label == "CET"
