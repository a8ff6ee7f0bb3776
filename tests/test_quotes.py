"""
Unit tests for the quote widget.

The network call is never made: `QuoteFetcher._get` is patched at the class
level (slots-safe) to return canned payloads or to raise.
"""

from __future__ import annotations

import asyncio
import random
from typing import Any

import pytest

from corner.widgets.quotes import (
    OFFLINE_QUOTES,
    QUOTE_TAGS,
    QuoteFetcher,
    build_quote_url,
)


def _fetcher() -> QuoteFetcher:
    return QuoteFetcher(url="https://quotes.example/random", rng=random.Random(7))


def test_build_quote_url_keeps_pipes() -> None:
    url = build_quote_url("https://quotes.example/random")
    assert url == "https://quotes.example/random?tags=" + "|".join(QUOTE_TAGS)
    assert build_quote_url("https://q.example/r?lang=en", ("a", "b")).endswith("?lang=en&tags=a|b")


def test_fetch_success(monkeypatch: Any) -> None:
    captured: dict[str, str] = {}

    def fake_get(self: QuoteFetcher, url: str) -> dict[str, Any]:
        captured["url"] = url
        return {"content": "  Keep going.  ", "author": "Someone"}

    monkeypatch.setattr(QuoteFetcher, "_get", fake_get)
    result = _fetcher().fetch()

    assert result.text == "Keep going."
    assert result.attribution == "Someone"
    assert result.source_label == "Quotable"
    assert not result.is_offline
    assert result.meta_line() == "— Someone • Quotable"
    assert "tags=motivational|" in captured["url"]


def test_missing_author_defaults_to_unknown(monkeypatch: Any) -> None:
    monkeypatch.setattr(QuoteFetcher, "_get", lambda self, url: {"content": "Hi"})
    assert _fetcher().fetch().attribution == "Unknown"


def test_network_failure_falls_back_offline(monkeypatch: Any) -> None:
    def boom(self: QuoteFetcher, url: str) -> Any:
        raise RuntimeError("Quote network error: unreachable")

    monkeypatch.setattr(QuoteFetcher, "_get", boom)
    result = _fetcher().fetch()

    assert result.text in OFFLINE_QUOTES
    assert result.source_label == ""
    assert result.is_offline
    assert result.meta_line() == "— offline set"


@pytest.mark.parametrize(  # type: ignore[misc]
    "payload",
    [{}, {"content": ""}, {"content": "   "}, {"content": 42}, ["not", "a", "dict"], None],
)
def test_malformed_payload_falls_back_offline(monkeypatch: Any, payload: Any) -> None:
    monkeypatch.setattr(QuoteFetcher, "_get", lambda self, url: payload)
    result = _fetcher().fetch()
    assert result.is_offline and result.text in OFFLINE_QUOTES


def test_fetch_async_uses_same_path(monkeypatch: Any) -> None:
    monkeypatch.setattr(QuoteFetcher, "_get", lambda self, url: {"content": "Async"})
    result = asyncio.run(_fetcher().fetch_async())
    assert result.text == "Async"


def test_from_settings_reads_env(monkeypatch: Any) -> None:
    from corner.core.settings import load_settings

    monkeypatch.setenv("CORNER_QUOTE_URL", "https://other.example/q")
    monkeypatch.setenv("CORNER_QUOTE_TIMEOUT", "2.5")
    load_settings.cache_clear()

    fetcher = QuoteFetcher.from_settings()
    assert fetcher.url == "https://other.example/q"
    assert fetcher.timeout_seconds == 2.5
