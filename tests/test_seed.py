import json
import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from devdesk.db import seed as seed_module
from devdesk.db.session import init_db
from devdesk.core.choices import CATEGORY_CHOICES, STATUS_CHOICES
from devdesk.crud.tickets import list_tickets
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


def _counts(db) -> tuple[int, int, int]:
    return tuple(
        db.scalar(select(func.count()).select_from(model)) for model in (Ticket, Article, Asset)
    )


def test_seed_inserts_demo_rows(db_session):
    counts = seed_module.seed(db_session)

    assert counts == {"tickets": 6, "kb_articles": 4, "assets": 4}
    assert _counts(db_session) == (6, 4, 4)
    statuses = {t.status for t in list_tickets(db_session)}
    assert statuses == set(STATUS_CHOICES)
    assert {t.category for t in list_tickets(db_session)} <= set(CATEGORY_CHOICES)


def test_seed_reset_replaces_rows_and_append_adds(db_session):
    seed_module.seed(db_session)
    seed_module.seed(db_session)
    assert _counts(db_session) == (6, 4, 4)

    seed_module.seed(db_session, reset=False)
    assert _counts(db_session) == (12, 8, 8)


def test_main_seeds_given_database(tmp_path, capsys):
    db_file = tmp_path / "demo.db"
    url = f"sqlite:///{db_file}"

    assert seed_module.main(["--database-url", url]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["status"] == "seeded"
    assert out["counts"]["assets"] == 4

    engine = create_engine(url)
    with sessionmaker(bind=engine)() as db:
        assert _counts(db) == (6, 4, 4)
    engine.dispose()
