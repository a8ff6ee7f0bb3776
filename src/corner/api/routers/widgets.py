"""
API Routes for the stateless and single-value widgets.

Endpoints
---------
- `GET /dashboard`: Clock, annual countdown, countdown rows, note count, playlist.
- `GET /quote`: A fresh quote; always 200 (offline pool on any failure).
- `GET /prompt`: Random prompt + tiny mission.
- `GET /playlist`, `PUT /playlist`, `DELETE /playlist`: Show / save / reset
  the embedded playlist.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from corner.api.deps import get_dashboard, unwrap_or_422
from corner.api.schemas import PlaylistUpdate, PlaylistView, PromptView
from corner.core.contracts import QuoteResult
from corner.dashboard import Dashboard
from corner.widgets import embed_url
from corner.widgets.prompts import draw_prompt

router = APIRouter(tags=["Widgets"])


@router.get("/dashboard", summary="Current dashboard snapshot")
async def dashboard_snapshot(dash: Dashboard = Depends(get_dashboard)) -> dict[str, Any]:
    dash.refresh_clock()
    dash.refresh_anchor()
    dash.refresh_countdowns()
    return dash.snapshot()


@router.get("/quote", response_model=QuoteResult, summary="Fetch a quote")
async def get_quote(dash: Dashboard = Depends(get_dashboard)) -> QuoteResult:
    return await dash.refresh_quote()


@router.get("/prompt", response_model=PromptView, summary="Draw a prompt and mission")
async def get_prompt() -> PromptView:
    prompt = draw_prompt()
    return PromptView(text=prompt.text, mission=prompt.mission)


def _playlist_view(playlist_id: str) -> PlaylistView:
    return PlaylistView(playlist_id=playlist_id, embed_url=embed_url(playlist_id))


@router.get("/playlist", response_model=PlaylistView)
async def get_playlist(dash: Dashboard = Depends(get_dashboard)) -> PlaylistView:
    return _playlist_view(dash.playlist.load())


@router.put("/playlist", response_model=PlaylistView)
async def save_playlist(
    body: PlaylistUpdate,
    dash: Dashboard = Depends(get_dashboard),
) -> PlaylistView:
    return _playlist_view(unwrap_or_422(dash.playlist.save(body.value)))


@router.delete("/playlist", response_model=PlaylistView)
async def reset_playlist(dash: Dashboard = Depends(get_dashboard)) -> PlaylistView:
    return _playlist_view(dash.playlist.reset())


__all__ = ["router"]
