"""Dashboard session state and the periodic render loops that keep it fresh."""

from __future__ import annotations

from .state import Dashboard
from .sync import PeriodicJob, RenderSync

__all__ = ["Dashboard", "PeriodicJob", "RenderSync"]
