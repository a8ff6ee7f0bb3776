"""
Request/response models for the Corner HTTP API.

Persisted records (`CountdownRecord`, `NoteRecord`, `QuoteResult`) are
returned as-is; this module only adds the request bodies and the few
view-shaped responses that do not exist as records.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from corner.core.contracts import Author


class CountdownCreate(BaseModel):
    name: str = Field("", description="Event name; blank is rejected.")
    date: str = Field("", description="Target date as YYYY-MM-DD (civil midnight).")


class CountdownView(BaseModel):
    id: str
    name: str
    date: str
    remaining: str
    done: bool


class NoteCreate(BaseModel):
    text: str = Field("", description="Primary note text; blank is rejected.")
    reply: str = Field("", description="Optional reply from the other party.")
    author: Author | None = Field(None, description="Defaults to the session author.")


class AuthorUpdate(BaseModel):
    author: Author


class PlaylistUpdate(BaseModel):
    value: str = Field("", description="Bare playlist id or a URL containing list=.")


class PlaylistView(BaseModel):
    playlist_id: str
    embed_url: str


class PromptView(BaseModel):
    text: str
    mission: str


__all__ = [
    "AuthorUpdate",
    "CountdownCreate",
    "CountdownView",
    "NoteCreate",
    "PlaylistUpdate",
    "PlaylistView",
    "PromptView",
]
