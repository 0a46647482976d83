"""Beginner-friendly overview for this module.

WHAT: The ``tickets`` table: support requests raised against the helpdesk.
WHEN: Imported by ``init_db`` and by the ticket record operations.
WHY: Status is the only column that changes after a ticket is created.
HOW: Plain SQLAlchemy declarative columns; timestamps are stored as text.

File: devdesk/models/ticket.py
"""


from __future__ import annotations
from sqlalchemy import Column, Integer, Text
from ..core.choices import STATUS_OPEN
from ..db.session import Base


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default=STATUS_OPEN, index=True)
    created_at = Column(Text, nullable=False)
