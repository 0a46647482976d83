"""Beginner-friendly overview for this module.

WHAT: Request and response shapes for the ticket API.
WHEN: Used by ``devdesk/routers/api_tickets.py`` to parse bodies and render rows.
WHY: Required-field checks happen after trimming in the record layer, so every
     input field here is optional and may be blank.
HOW: Pydantic models; ``TicketOut`` reads straight from ORM rows.

File: devdesk/schemas/ticket.py
"""


from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ..core.choices import CATEGORY_CHOICES, STATUS_CHOICES


class TicketCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, examples=list(CATEGORY_CHOICES))


class TicketStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = Field(default=None, examples=list(STATUS_CHOICES))


class TicketOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    status: str
    created_at: str

