"""SQLAlchemy engine, session factory and table bootstrap."""

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from ..core.config import settings

# SQLite connections are handed between FastAPI worker threads.
CONNECT_ARGS = {"check_same_thread": False} if settings.uses_sqlite else {}

engine = create_engine(settings.DB_URL, connect_args=CONNECT_ARGS)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_conn, connection_record) -> None:
    # SQLite's built-in lower() folds ASCII only; search relies on full case folding.
    dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def install_sqlite_functions(bind: Engine) -> None:
    """Attach the connection hook to ``bind``. Must run before its first connection."""

    if bind.dialect.name != "sqlite":
        return
    if not event.contains(bind, "connect", _register_sqlite_functions):
        event.listen(bind, "connect", _register_sqlite_functions)


install_sqlite_functions(engine)


def init_db(bind: Engine | None = None) -> None:
    """Prepare an engine for use and create any missing tables. Safe to call on every startup."""

    # Importing the models registers them with ``Base.metadata``.
    from ..models import article, asset, ticket  # noqa: F401

    bind = bind or engine
    install_sqlite_functions(bind)
    Base.metadata.create_all(bind=bind)


def get_db():
    """FastAPI dependency that yields a session and guarantees cleanup."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
