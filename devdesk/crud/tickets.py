from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import desc, select, update
from sqlalchemy.orm import Session

from ..core.choices import STATUS_CHOICES, STATUS_OPEN
from ..models.ticket import Ticket
from ._common import clean_fields, require_fields, utc_timestamp
from .search import ticket_filters

LOGGER = logging.getLogger(__name__)

TICKET_FIELDS = ("title", "description", "category")
REQUIRED_TICKET_FIELDS = TICKET_FIELDS
INVALID_STATUS_MESSAGE = "status must be Open, In Progress, or Closed"

# SQLite INTEGER primary keys are signed 64-bit; anything outside cannot exist.
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


def list_tickets(
    db: Session,
    q: str | None = None,
    status: str | None = None,
    category: str | None = None,
) -> list[Ticket]:
    """Return tickets matching every supplied filter, newest id first."""
    stmt = (
        select(Ticket)
        .where(*ticket_filters(q=q, status=status, category=category))
        .order_by(desc(Ticket.id))
    )
    return list(db.execute(stmt).scalars().all())


def create_ticket(db: Session, payload: Mapping[str, Any]) -> Ticket:
    """Validate and persist a new ticket. New tickets always start out Open.

    Raises ``ValueError`` naming the missing fields; nothing is written then.
    """
    data = clean_fields(payload, TICKET_FIELDS)
    require_fields(data, REQUIRED_TICKET_FIELDS)

    obj = Ticket(**data, status=STATUS_OPEN, created_at=utc_timestamp())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    LOGGER.info(
        "ticket.created",
        extra={"extra_data": {"ticket_id": obj.id, "category": obj.category}},
    )
    return obj


def update_ticket_status(db: Session, ticket_id: int, status: str | None) -> int:
    """Set a ticket's status and return the number of matched rows (0 = unknown id)."""
    value = (status or "").strip()
    if value not in STATUS_CHOICES:
        raise ValueError(INVALID_STATUS_MESSAGE)
    if not MIN_ROW_ID <= ticket_id <= MAX_ROW_ID:
        return 0

    result = db.execute(
        update(Ticket).where(Ticket.id == ticket_id).values(status=value)
    )
    db.commit()
    if result.rowcount:
        LOGGER.info(
            "ticket.status_changed",
            extra={"extra_data": {"ticket_id": ticket_id, "status": value}},
        )
    return result.rowcount
