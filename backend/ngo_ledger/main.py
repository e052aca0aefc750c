"""NGO Ledger API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError -> structured JSON responses
    - Logging and the database pool are initialized once, in lifespan, before any invocation

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Database pool skipped entirely for LEDGER_BACKEND=memory
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ngo_ledger.api.error_handlers import register_error_handlers
from ngo_ledger.api.routes import chaincode, health
from ngo_ledger.config import get_settings
from ngo_ledger.infrastructure import database
from ngo_ledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.ledger_backend == "database":
        database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info(f"NGO Ledger API started (ledger backend: {settings.ledger_backend})")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("NGO Ledger API shutting down")


app = FastAPI(
    title="NGO Ledger API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(chaincode.router)

register_error_handlers(app)
