"""Application object and top-level wiring for DevDesk.

This module brings together configuration, table bootstrap, middleware, the
API routers and error handling. ``devdesk/main.py`` finishes the job by adding
logging, metrics and the client-shell catch-all, and is the ASGI entry point
(``uvicorn devdesk.main:app``).
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.errors import register_exception_handlers
from .db.session import engine, init_db
from .middlewares import RequestIdMiddleware

# ---------- App init ----------
app = FastAPI(title=settings.APP_NAME)

# ---------- DB init ----------
# Idempotent: creates only the tables that are missing.
init_db(engine)

# ---------- Middleware ----------
if settings.ALLOWED_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "PATCH"],
        allow_headers=["*"],
    )
app.add_middleware(RequestIdMiddleware)

# ---------- Exception handling ----------
# Every failure leaves the service as ``{"error": "<message>"}``.
register_exception_handlers(app)

# ---------- Routers ----------
from .routers import api_tickets as api_tickets_router  # noqa: E402

app.include_router(api_tickets_router.router)

from .routers import api_kb as api_kb_router  # noqa: E402

app.include_router(api_kb_router.router)

from .routers import api_assets as api_assets_router  # noqa: E402

app.include_router(api_assets_router.router)


@app.get("/health", tags=["health"])
async def health() -> dict[str, bool]:
    return {"ok": True}


__all__ = ["app"]
