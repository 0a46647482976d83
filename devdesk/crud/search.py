"""Filter clauses for the list/search endpoints.

Each builder turns optional, user-supplied filter values into a list of
SQLAlchemy boolean clauses meant to be passed to ``Select.where(*clauses)``;
the clauses are combined with AND. Blank values are dropped entirely rather
than compared against an empty string. Every value reaches the database as a
bound parameter.
"""

from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

from ..models.article import Article
from ..models.asset import Asset
from ..models.ticket import Ticket


def clean_term(value: str | None) -> str:
    return (value or "").strip()


def text_match(term: str, *columns) -> ColumnElement[bool]:
    """Case-insensitive literal substring match of ``term`` against any column."""

    # autoescape keeps % and _ in the term literal instead of LIKE wildcards.
    return or_(*(column.icontains(term, autoescape=True) for column in columns))


def ticket_filters(
    q: str | None = None,
    status: str | None = None,
    category: str | None = None,
) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []
    term = clean_term(q)
    if term:
        clauses.append(text_match(term, Ticket.title, Ticket.description))
    status = clean_term(status)
    if status:
        clauses.append(Ticket.status == status)
    category = clean_term(category)
    if category:
        clauses.append(Ticket.category == category)
    return clauses


def article_filters(q: str | None = None) -> list[ColumnElement[bool]]:
    term = clean_term(q)
    if not term:
        return []
    return [text_match(term, Article.title, Article.content, Article.tags)]


def asset_filters(q: str | None = None) -> list[ColumnElement[bool]]:
    term = clean_term(q)
    if not term:
        return []
    return [
        text_match(
            term,
            Asset.name,
            Asset.asset_tag,
            Asset.serial_number,
            Asset.assigned_to,
            Asset.notes,
        )
    ]
