# -----------------------------------------------------------------------------
# Quote widget: one random quote from the network, or from a bundled pool.
#
# The primary path is a single GET against a Quotable-compatible endpoint
# restricted to general motivation tags (nothing romantic):
#
#     GET {quote_url}?tags=motivational|inspirational|success|wisdom|famous-quotes
#
# Any failure -- network error, timeout, non-2xx status, a body that is not
# JSON, or a payload without a usable `content` field -- falls back to a
# uniformly random entry of OFFLINE_QUOTES with an empty source label.
# `fetch()` therefore always returns a QuoteResult and never raises.
#
# The implementation uses only the Python standard library (`urllib.request`).
# Unit tests are expected to *mock* the internal `_get()` method so that no
# real HTTP calls are made during CI.
# -----------------------------------------------------------------------------
from __future__ import annotations

import asyncio
import json
import random
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from corner.core.contracts import QuoteResult
from corner.core.settings import get_logger, load_settings

logger = get_logger("corner.widgets.quotes")

QUOTE_TAGS: tuple[str, ...] = (
    "motivational",
    "inspirational",
    "success",
    "wisdom",
    "famous-quotes",
)
SOURCE_LABEL = "Quotable"
OFFLINE_ATTRIBUTION = "offline set"

OFFLINE_QUOTES: tuple[str, ...] = (
    "Discipline is just kindness to your future self.",
    "Focus on what you can control. Let the rest be background noise.",
    "Start before you feel ready.",
    "You don’t need a new plan. You need a clean next step.",
    "Make it simple. Make it repeatable.",
    "Done is better than perfect, and calm is better than rushed.",
    "Your confidence grows every time you keep a promise to yourself.",
)


def build_quote_url(base_url: str, tags: Sequence[str] = QUOTE_TAGS) -> str:
    """Return ``base_url`` with the ``tags`` filter appended (``|`` kept literal)."""
    query = urllib.parse.urlencode({"tags": "|".join(tags)}, safe="|")
    sep = "&" if urllib.parse.urlsplit(base_url).query else "?"
    return f"{base_url}{sep}{query}"


@dataclass(slots=True)
class QuoteFetcher:
    """Fetch a quote with a deterministic offline fallback.

    Parameters
    ----------
    url:
        Base URL of the quote endpoint (without the tag filter).
    timeout_seconds:
        Network timeout for the single GET request.
    rng:
        Random source for the offline pick; tests pass a seeded instance.
    """

    url: str
    timeout_seconds: float = 5.0
    tags: tuple[str, ...] = QUOTE_TAGS
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def from_settings(cls) -> QuoteFetcher:
        cfg = load_settings()
        return cls(url=cfg.quote_url, timeout_seconds=cfg.quote_timeout_seconds)

    # --------------------------------------------------------------------- #
    # Public API
    # --------------------------------------------------------------------- #
    def fetch(self) -> QuoteResult:
        """Return a network quote, or an offline one if anything goes wrong."""
        try:
            payload = self._get(build_quote_url(self.url, self.tags))
            return self._extract_quote(payload)
        except Exception as exc:
            logger.info("Quote source unavailable, using offline set: %s", exc)
            return self.offline()

    async def fetch_async(self) -> QuoteResult:
        """Run :meth:`fetch` in a worker thread so the event loop keeps ticking."""
        return await asyncio.to_thread(self.fetch)

    def offline(self) -> QuoteResult:
        """Pick one entry of the bundled pool uniformly at random."""
        return QuoteResult(
            text=self.rng.choice(OFFLINE_QUOTES),
            attribution=OFFLINE_ATTRIBUTION,
            source_label="",
        )

    # --------------------------------------------------------------------- #
    # Internal helpers (test seams)
    # --------------------------------------------------------------------- #
    def _get(self, url: str) -> Any:
        """Perform the HTTP GET and decode the JSON body.

        This is the seam tests patch to simulate success or failure without
        network I/O.

        Raises
        ------
        RuntimeError
            On HTTP errors, network errors, timeouts, or a non-JSON body.
        """
        request = urllib.request.Request(
            url=url,
            headers={"Accept": "application/json", "Cache-Control": "no-store"},
            method="GET",
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout_seconds) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as exc:
            raise RuntimeError(f"Quote HTTP error {exc.code}: {exc.reason}") from exc
        except (urllib.error.URLError, TimeoutError) as exc:
            raise RuntimeError(f"Quote network error: {exc}") from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise RuntimeError("Failed to decode quote response as JSON") from exc

    @staticmethod
    def _extract_quote(payload: Any) -> QuoteResult:
        """Map a Quotable ``{"content": ..., "author": ...}`` body to a QuoteResult.

        Raises
        ------
        RuntimeError
            If ``content`` is missing or empty.
        """
        if not isinstance(payload, Mapping):
            raise RuntimeError("Quote response is not a JSON object")
        content = payload.get("content")
        if not isinstance(content, str) or not content.strip():
            raise RuntimeError("Quote response has no content")
        author = payload.get("author")
        if not isinstance(author, str) or not author.strip():
            author = "Unknown"
        return QuoteResult(
            text=content.strip(),
            attribution=author.strip(),
            source_label=SOURCE_LABEL,
        )


__all__ = ["OFFLINE_QUOTES", "QuoteFetcher", "build_quote_url"]
