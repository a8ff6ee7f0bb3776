"""
API Routes for the two-party note log.

Endpoints
---------
- `GET /notes`: All notes, newest first.
- `POST /notes`: Add a note; `author` defaults to the session author.
- `PUT /notes/author`: Select the session author for later notes.
- `DELETE /notes/{id}`, `DELETE /notes`: Delete one / clear all.
- `GET /notes/fragment`: Escaped HTML with the author's panel first.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import HTMLResponse

from corner.api.deps import get_dashboard, unwrap_or_422
from corner.api.schemas import AuthorUpdate, NoteCreate
from corner.core.contracts import NoteRecord
from corner.dashboard import Dashboard
from corner.render import notes_html

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=list[NoteRecord], summary="List notes")
async def list_notes(dash: Dashboard = Depends(get_dashboard)) -> list[NoteRecord]:
    return dash.notes.notes()


@router.post(
    "",
    response_model=NoteRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Add a note",
)
async def add_note(body: NoteCreate, dash: Dashboard = Depends(get_dashboard)) -> NoteRecord:
    return unwrap_or_422(dash.notes.add(body.text, body.reply, author=body.author))


@router.put("/author", response_model=AuthorUpdate, summary="Select the writing party")
async def set_author(body: AuthorUpdate, dash: Dashboard = Depends(get_dashboard)) -> AuthorUpdate:
    return AuthorUpdate(author=dash.notes.set_author(body.author))


@router.get("/fragment", response_class=HTMLResponse)
async def notes_fragment(dash: Dashboard = Depends(get_dashboard)) -> HTMLResponse:
    return HTMLResponse(notes_html(dash.notes.notes(), dash.clock))


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, dash: Dashboard = Depends(get_dashboard)) -> Response:
    dash.notes.remove(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notes(dash: Dashboard = Depends(get_dashboard)) -> Response:
    dash.notes.clear_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
