"""LinkUp API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LinkUpError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event
    - Error handlers live in api/error_handlers.py and are registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkup.api.error_handlers import register_error_handlers
from linkup.api.routes import (
    attachments,
    auth,
    cart,
    coupons,
    guests,
    health,
    organizer_events,
    products,
    ticket_types,
)
from linkup.config import get_settings
from linkup.infrastructure.database import close_db, init_db
from linkup.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("LinkUp API started")
    yield
    await close_db()
    logger.info("LinkUp API shutting down")


app = FastAPI(
    title="LinkUp API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.ping_router)
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(organizer_events.router)
app.include_router(ticket_types.router)
app.include_router(guests.router)
app.include_router(coupons.router)
app.include_router(attachments.router)
app.include_router(products.router)
app.include_router(cart.router)

register_error_handlers(app)
