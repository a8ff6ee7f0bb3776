"""Core package initializer for Corner.

Holds the pieces every widget depends on:
    from corner.core.settings import settings, load_settings, Settings, get_logger
    from corner.core.clock import CivilClock
    from corner.core.countdown import AnnualAnchor, next_occurrence, remaining
"""

from __future__ import annotations

__all__ = ["__doc__"]
