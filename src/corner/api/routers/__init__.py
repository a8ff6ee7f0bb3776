"""HTTP routers, one module per widget group."""

from __future__ import annotations

from . import countdowns, notes, widgets

__all__ = ["countdowns", "notes", "widgets"]
