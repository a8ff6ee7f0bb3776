"""
Shared dependencies for the API routers.

The dashboard session is a process-wide singleton built on the file-backed
store. Tests replace it through ``app.dependency_overrides[get_dashboard]``.
"""

from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException

from corner.core.contracts import Notice
from corner.core.result import Result
from corner.dashboard import Dashboard
from corner.store import get_store

T = TypeVar("T")

_dashboard: Dashboard | None = None


def get_dashboard() -> Dashboard:
    """Accessor for the global dashboard session."""
    global _dashboard
    if _dashboard is None:
        _dashboard = Dashboard.create(get_store())
        _dashboard.render_all()
    return _dashboard


def unwrap_or_422(result: Result[T, Notice]) -> T:
    """Return the success value or raise HTTP 422 carrying the notice text."""
    if result.is_err():
        notice = result.unwrap_err()
        raise HTTPException(status_code=422, detail=notice.value)
    return result.unwrap()


__all__ = ["get_dashboard", "unwrap_or_422"]
