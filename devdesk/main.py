from prometheus_fastapi_instrumentator import Instrumentator

from devdesk.core.config import settings
from devdesk.core.logging import setup_logging
from devdesk.routers import shell as shell_router
from . import app as base_app

setup_logging(settings.LOG_LEVEL)
app = base_app

if settings.METRICS_ENABLED:
    instrumentator = Instrumentator(excluded_handlers=["/metrics"])
    instrumentator.instrument(app).expose(app, include_in_schema=False)

# Must stay last: the shell route matches every remaining GET path.
app.include_router(shell_router.router)
