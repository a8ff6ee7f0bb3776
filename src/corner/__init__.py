"""Corner: a personal dashboard of clocks, countdowns, notes and quotes.

The package is split into a small time/persistence core (``corner.core``,
``corner.store``), the dashboard widgets built on top of it
(``corner.widgets``), the periodic render loops (``corner.dashboard``) and
two thin surfaces: a Typer CLI and a FastAPI app.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"
