"""Sample Database API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers registered once (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - Connection pool created on startup and disposed on shutdown via lifespan;
      it lives on app.state.db_manager for the duration of the process

Design Decisions:
    - Lifespan over @app.on_event
    - OpenAPI document generated by FastAPI from the route definitions; Swagger UI at /docs
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sample_api.api.error_handlers import register_error_handlers
from sample_api.api.routes import agents, companies, customers, health
from sample_api.config import get_settings
from sample_api.infrastructure.database import DatabaseSessionManager
from sample_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info("Sample API started")
    yield
    logger.info("Sample API shutting down")
    await app.state.db_manager.close()


settings = get_settings()
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

app.include_router(health.router)
app.include_router(agents.router)
app.include_router(companies.router)
app.include_router(customers.router)

register_error_handlers(app)
