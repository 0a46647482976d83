"""Beginner-friendly overview for this module.

WHAT: HTTP endpoints for support tickets: search, create, status change, CSV.
WHEN: Mounted by ``devdesk/__init__.py`` under the ``/api`` prefix.
WHY: Keeps request parsing and status codes apart from the record operations.
HOW: Each handler borrows a session from ``get_db`` and delegates to
     ``devdesk/crud/tickets.py``; ``ValueError`` from that layer becomes a 400.

File: devdesk/routers/api_tickets.py
"""


from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..core.errors import StorageFault
from ..db.session import get_db
from ..schemas.common import CreatedOut, OkOut
from ..schemas.ticket import TicketCreate, TicketOut, TicketStatusUpdate
from ..crud.tickets import create_ticket, list_tickets, update_ticket_status
from ..services.csv_export import TICKET_COLUMNS, TICKETS_FILENAME, attachment_headers, to_csv

router = APIRouter(prefix="/api", tags=["tickets"])


@router.get("/tickets.csv", response_class=Response)
def api_export_csv(db: Session = Depends(get_db)):
    try:
        rows = list_tickets(db)
    except SQLAlchemyError as exc:
        raise StorageFault(f"CSV export failed: {exc}") from exc
    return Response(
        content=to_csv(rows, TICKET_COLUMNS),
        media_type="text/csv; charset=utf-8",
        headers=attachment_headers(TICKETS_FILENAME),
    )


@router.get("/tickets", response_model=list[TicketOut])
def api_list(
    q: str | None = Query(default=None),
    status: str | None = Query(default=None),
    category: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return list_tickets(db, q=q, status=status, category=category)


@router.post("/tickets", response_model=CreatedOut, status_code=201)
def api_create(payload: TicketCreate, db: Session = Depends(get_db)):
    try:
        ticket = create_ticket(db, payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CreatedOut(id=ticket.id, changes=1)


@router.patch("/tickets/{ticket_id}", response_model=OkOut)
def api_update_status(ticket_id: int, payload: TicketStatusUpdate, db: Session = Depends(get_db)):
    try:
        changed = update_ticket_status(db, ticket_id, payload.status)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if not changed:
        raise HTTPException(404, "Ticket not found")
    return OkOut(ok=True)
