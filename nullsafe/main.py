"""NullSafe API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NullSafeError → structured JSON responses
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - The HTTP surface reuses NullableArrayDemo; stdout is untouched (BufferPrinter)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nullsafe.api.error_handlers import register_error_handlers
from nullsafe.api.routes import demo, health
from nullsafe.config import get_settings
from nullsafe.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("NullSafe API started")
    yield
    logger.info("NullSafe API shutting down")


app = FastAPI(
    title="NullSafe API", version=get_settings().version, lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(demo.router)

register_error_handlers(app)
