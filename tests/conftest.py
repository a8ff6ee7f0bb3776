"""
Shared fixtures for the Corner test-suite.

Every test runs against a throwaway data directory, so nothing ever touches
a real `.corner/` folder, and process-wide singletons (cached settings, the
file-backed store, the API dashboard session) are reset around each test.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

import corner.api.deps as api_deps
from corner.core.clock import CivilClock
from corner.core.settings import load_settings
from corner.store import CollectionStore, MemoryBackend

# 2026-03-01 06:30:00 UTC == 2026-03-01 12:00:00 IST
FIXED_UTC = datetime(2026, 3, 1, 6, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)  # type: ignore[misc]
def isolated_env(tmp_path: Path, monkeypatch: Any) -> Generator[None, None, None]:
    """Point the store at `tmp_path` and reset cached singletons."""
    monkeypatch.setenv("CORNER_ENV", "test")
    monkeypatch.setenv("CORNER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("CORNER_TIMEZONE", "Asia/Kolkata")
    monkeypatch.setenv("CORNER_TZ_LABEL", "IST")
    load_settings.cache_clear()
    CollectionStore._instance = None
    api_deps._dashboard = None
    yield
    load_settings.cache_clear()
    CollectionStore._instance = None
    api_deps._dashboard = None


@pytest.fixture  # type: ignore[misc]
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture  # type: ignore[misc]
def store(backend: MemoryBackend) -> CollectionStore:
    return CollectionStore(backend)


@pytest.fixture  # type: ignore[misc]
def fixed_source() -> Callable[[], datetime]:
    return lambda: FIXED_UTC


@pytest.fixture  # type: ignore[misc]
def clock(fixed_source: Callable[[], datetime]) -> CivilClock:
    """IST clock pinned to 2026-03-01 12:00 local time."""
    return CivilClock("Asia/Kolkata", label="IST", source=fixed_source)
