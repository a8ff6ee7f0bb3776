"""
Saved playlist embed.

Users paste either a bare YouTube playlist id (``PL...``) or any URL carrying
a ``list=`` query parameter. :func:`extract_playlist_id` resolves both to the
canonical id; anything else is kept verbatim rather than rejected, so an
unusual id format still works. Only empty input is refused.
"""

from __future__ import annotations

import re
import urllib.parse

from corner.core.contracts import Notice
from corner.core.result import Result, err, ok
from corner.core.settings import load_settings
from corner.store import PLAYLIST_KEY, CollectionStore

_BARE_ID_RE = re.compile(r"^PL[a-zA-Z0-9_-]{10,}$")
_LIST_PARAM_RE = re.compile(r"[?&]list=([a-zA-Z0-9_-]+)")

EMBED_BASE = "https://www.youtube-nocookie.com/embed/videoseries"


def extract_playlist_id(raw: str | None) -> str:
    """Return the playlist id contained in ``raw`` ("" for empty input)."""
    text = (raw or "").strip()
    if not text:
        return ""
    if _BARE_ID_RE.match(text):
        return text
    match = _LIST_PARAM_RE.search(text)
    if match:
        return match.group(1)
    return text


def embed_url(playlist_id: str) -> str:
    """Privacy-enhanced embed URL for ``playlist_id`` (id is percent-encoded)."""
    return f"{EMBED_BASE}?list={urllib.parse.quote(playlist_id, safe='')}"


class PlaylistSetting:
    """The one playlist id the dashboard embeds."""

    def __init__(
        self,
        store: CollectionStore,
        *,
        default_id: str | None = None,
        key: str = PLAYLIST_KEY,
    ) -> None:
        self.store = store
        self.key = key
        self.default_id = default_id or load_settings().default_playlist_id

    def load(self) -> str:
        return self.store.load_value(self.key, self.default_id)

    def save(self, raw: str | None) -> Result[str, Notice]:
        playlist_id = extract_playlist_id(raw)
        if not playlist_id:
            return err(Notice.MISSING_PLAYLIST)
        self.store.save_value(self.key, playlist_id)
        return ok(playlist_id)

    def reset(self) -> str:
        self.store.save_value(self.key, self.default_id)
        return self.default_id


__all__ = ["EMBED_BASE", "PlaylistSetting", "embed_url", "extract_playlist_id"]
