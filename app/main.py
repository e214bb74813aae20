"""Imago API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ImagoError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Container (DB manager, verifier, interops) built once on startup via lifespan
      and released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Container stored on app.state: tests install their own before the first request
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers, register_request_logging
from app.api.routes import auth, health, report
from app.config import get_settings
from app.container import build_container
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.firebase_verifier import FirebaseTokenVerifier
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    verifier = FirebaseTokenVerifier(
        project_id=settings.firebase_project_id,
        jwks_url=settings.firebase_jwks_url,
        jwks_ttl_seconds=settings.firebase_jwks_ttl_seconds,
        clock_skew_seconds=settings.token_clock_skew_seconds,
    )
    app.state.container = build_container(
        db,
        verifier,
        identity_resolve_max_attempts=settings.identity_resolve_max_attempts,
        request_timeout_seconds=settings.request_timeout_seconds,
    )
    logger.info("Imago API started")
    yield
    logger.info("Imago API shutting down")
    await verifier.aclose()
    await db.dispose()


app = FastAPI(
    title="Imago API", version="2.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(report.router)


def run() -> None:
    """Serve on the configured bind host/port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
