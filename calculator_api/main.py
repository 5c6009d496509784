"""Calculator API — FastAPI application factory and ASGI entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every fault → uniform error envelope
    - Settings threaded in explicitly; stack exposure decided once, here
    - app.state.started_at captured once per application instance

Design Decisions:
    - create_app() factory over a bare module-level app: tests build isolated
      apps with their own Settings
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from calculator_api import __version__
from calculator_api.api.error_handlers import register_error_handlers
from calculator_api.api.routes import calculator, health
from calculator_api.config import Settings, get_settings
from calculator_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Calculator API started ({settings.environment})",
        extra={"host": settings.host, "port": settings.port},
    )
    yield
    logger.info("Calculator API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a fully wired application for the given settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Calculator API", version=__version__, lifespan=lifespan,
        debug=False,
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()

    app.include_router(health.router)
    app.include_router(calculator.router)

    register_error_handlers(app, include_stack=settings.is_development)
    return app


app = create_app()
