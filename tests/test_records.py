"""Beginner-friendly overview for this module.

WHAT: Exercises the record operations in ``devdesk/crud`` against SQLite.
WHEN: Collected by pytest.
WHY: Create/update rules (trimming, required fields, status enum) live there.
HOW: Each test gets a fresh in-memory database from the ``db_session`` fixture.

File: tests/test_records.py
"""


import os
import re
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from devdesk.db.session import init_db
from devdesk.crud.tickets import (
    INVALID_STATUS_MESSAGE,
    create_ticket,
    list_tickets,
    update_ticket_status,
)
from devdesk.crud.articles import create_article, list_articles
from devdesk.crud.assets import create_asset, list_assets
from devdesk.models.article import Article
from devdesk.models.asset import Asset
from devdesk.models.ticket import Ticket


@pytest.fixture()
def db_session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    init_db(engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def _count(db, model) -> int:
    return db.scalar(select(func.count()).select_from(model))


def test_init_db_is_idempotent():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    init_db(engine)
    init_db(engine)
    with engine.connect() as conn:
        names = {row[0] for row in conn.exec_driver_sql("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"tickets", "kb_articles", "assets"} <= names


def test_create_ticket_trims_and_defaults_to_open(db_session):
    ticket = create_ticket(
        db_session,
        {"title": "  Printer jam ", "description": "\tTray 2 stuck\n", "category": " Hardware "},
    )

    assert ticket.id is not None
    assert ticket.title == "Printer jam"
    assert ticket.description == "Tray 2 stuck"
    assert ticket.category == "Hardware"
    assert ticket.status == "Open"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", ticket.created_at)

    listed = list_tickets(db_session)
    assert [t.id for t in listed].count(ticket.id) == 1


def test_create_ticket_accepts_unlisted_category(db_session):
    ticket = create_ticket(db_session, {"title": "Badge", "description": "Lost badge", "category": "Facilities"})

    assert ticket.category == "Facilities"


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({}, "title, description, category are required"),
        ({"title": "   ", "description": "x", "category": "Network"}, "title is required"),
        ({"title": "t", "description": "d"}, "category is required"),
        ({"title": "t", "description": None, "category": ""}, "description, category are required"),
    ],
)
def test_create_ticket_missing_fields_writes_nothing(db_session, payload, message):
    with pytest.raises(ValueError) as excinfo:
        create_ticket(db_session, payload)

    assert str(excinfo.value) == message
    assert _count(db_session, Ticket) == 0


def test_update_status_reports_matched_rows(db_session):
    ticket = create_ticket(db_session, {"title": "VPN", "description": "809", "category": "Network"})

    assert update_ticket_status(db_session, ticket.id, " In Progress ") == 1
    db_session.expire_all()
    assert db_session.get(Ticket, ticket.id).status == "In Progress"


def test_update_status_is_idempotent(db_session):
    ticket = create_ticket(db_session, {"title": "VPN", "description": "809", "category": "Network"})

    assert update_ticket_status(db_session, ticket.id, "Closed") == 1
    assert update_ticket_status(db_session, ticket.id, "Closed") == 1
    db_session.expire_all()
    assert db_session.get(Ticket, ticket.id).status == "Closed"


def test_update_status_unknown_id_touches_nothing(db_session):
    ticket = create_ticket(db_session, {"title": "VPN", "description": "809", "category": "Network"})

    assert update_ticket_status(db_session, ticket.id + 1000, "Closed") == 0
    db_session.expire_all()
    assert db_session.get(Ticket, ticket.id).status == "Open"


@pytest.mark.parametrize("status", ["", None, "closed", "Resolved", "In  Progress"])
def test_update_status_rejects_values_outside_the_enum(db_session, status):
    ticket = create_ticket(db_session, {"title": "VPN", "description": "809", "category": "Network"})

    with pytest.raises(ValueError, match=INVALID_STATUS_MESSAGE):
        update_ticket_status(db_session, ticket.id, status)
    db_session.expire_all()
    assert db_session.get(Ticket, ticket.id).status == "Open"


def test_listing_is_newest_id_first(db_session):
    ids = [
        create_ticket(db_session, {"title": f"T{n}", "description": "d", "category": "Access"}).id
        for n in range(4)
    ]
    update_ticket_status(db_session, ids[0], "Closed")

    assert [t.id for t in list_tickets(db_session)] == sorted(ids, reverse=True)


def test_create_article_optional_tags(db_session):
    article = create_article(db_session, {"title": " Reset cache ", "content": " Steps "})

    assert article.title == "Reset cache"
    assert article.content == "Steps"
    assert article.tags == ""
    assert [a.id for a in list_articles(db_session)] == [article.id]


def test_create_article_requires_title_and_content(db_session):
    with pytest.raises(ValueError, match="title, content are required"):
        create_article(db_session, {"tags": "vpn"})
    assert _count(db_session, Article) == 0


def test_create_asset_requires_only_name(db_session):
    with pytest.raises(ValueError, match="name is required"):
        create_asset(db_session, {"name": "  ", "asset_tag": "IT-1"})
    assert _count(db_session, Asset) == 0

    asset = create_asset(
        db_session,
        {"name": "iPhone 13", "asset_tag": " IT-MOB-0031 ", "assigned_to": "Sales Manager"},
    )
    assert asset.asset_tag == "IT-MOB-0031"
    assert asset.serial_number == ""
    assert asset.notes == ""
    assert [a.id for a in list_assets(db_session)] == [asset.id]


@pytest.mark.parametrize("ticket_id", [2**63, -(2**63) - 1, 10**20])
def test_update_status_out_of_range_id_touches_nothing(db_session, ticket_id):
    ticket = create_ticket(db_session, {"title": "VPN", "description": "809", "category": "Network"})

    assert update_ticket_status(db_session, ticket_id, "Closed") == 0
    db_session.expire_all()
    assert db_session.get(Ticket, ticket.id).status == "Open"
