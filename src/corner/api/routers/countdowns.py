"""
API Routes for the custom countdown list.

Endpoints
---------
- `GET /countdowns`: Rows of the last render, re-ticked against "now".
- `POST /countdowns`: Add a countdown (422 with the notice text on bad input).
- `DELETE /countdowns/{id}`: Delete one; unknown ids are a silent no-op.
- `DELETE /countdowns`: Clear the whole list.
- `GET /countdowns/fragment`: The list as an escaped HTML fragment.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import HTMLResponse

from corner.api.deps import get_dashboard, unwrap_or_422
from corner.api.schemas import CountdownCreate, CountdownView
from corner.core.contracts import CountdownRecord
from corner.dashboard import Dashboard
from corner.render import countdowns_html
from corner.widgets import CountdownRow

router = APIRouter(prefix="/countdowns", tags=["Countdowns"])


def _view(row: CountdownRow) -> CountdownView:
    return CountdownView(
        id=row.id,
        name=row.record.name,
        date=row.record.date.isoformat(),
        remaining=row.label,
        done=row.is_done,
    )


@router.get("", response_model=list[CountdownView], summary="List custom countdowns")
async def list_countdowns(dash: Dashboard = Depends(get_dashboard)) -> list[CountdownView]:
    return [_view(row) for row in dash.refresh_countdowns()]


@router.post(
    "",
    response_model=CountdownRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Add a custom countdown",
)
async def add_countdown(
    body: CountdownCreate,
    dash: Dashboard = Depends(get_dashboard),
) -> CountdownRecord:
    record = unwrap_or_422(dash.countdowns.add(body.name, body.date))
    dash.countdown_rows = dash.countdowns.rows
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_countdown(record_id: str, dash: Dashboard = Depends(get_dashboard)) -> Response:
    dash.countdowns.remove(record_id)
    dash.countdown_rows = dash.countdowns.rows
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_countdowns(dash: Dashboard = Depends(get_dashboard)) -> Response:
    dash.countdowns.clear_all()
    dash.countdown_rows = dash.countdowns.rows
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/fragment", response_class=HTMLResponse)
async def countdowns_fragment(dash: Dashboard = Depends(get_dashboard)) -> HTMLResponse:
    return HTMLResponse(countdowns_html(dash.refresh_countdowns(), dash.clock))


__all__ = ["router"]
