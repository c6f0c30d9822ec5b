"""Tradebook — FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from tradebook import __version__
from tradebook.config import Settings, settings as default_settings
from tradebook.database import Base, create_db_engine, create_session_factory, masked_url
from tradebook.errors import register_exception_handlers
from tradebook.logging_config import configure_logging
from tradebook.routers import health, positions, trades
from tradebook.seed import load_demo_data
import tradebook.models  # noqa: F401  (register tables on Base.metadata)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine: Engine = app.state.engine
    logger.info("Starting Tradebook %s on %s", __version__, masked_url(engine))

    if settings.CREATE_SCHEMA:
        Base.metadata.create_all(bind=engine)
        logger.info("Schema ready")

    if settings.SEED_DEMO_DATA:
        db = app.state.session_factory()
        try:
            load_demo_data(db)
        finally:
            db.close()

    yield

    if app.state.owns_engine:
        engine.dispose()


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application.

    The engine is created here (or passed in) and handed to the routes through
    ``app.state``; an engine passed in by the caller is not disposed on shutdown.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Tradebook",
        description="Read-only REST service over books, trades and positions.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.owns_engine = engine is None
    app.state.engine = engine if engine is not None else create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(positions.router)
    app.include_router(trades.router)

    return app


app = create_app()
