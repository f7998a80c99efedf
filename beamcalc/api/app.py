"""FastAPI application factory.

Instantiate with:
    uvicorn beamcalc.api.app:app --reload --port 8000
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beamcalc.api.router import router
from beamcalc.core.utils.config import get_default_config, load_config
from beamcalc.services import request_from_config

logger = logging.getLogger(__name__)

# Override in production:  CORS_ORIGINS="https://your-domain.com"
_CORS_ORIGINS: list[str] = os.getenv(
    "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
).split(",")


def _initial_config() -> dict:
    """Load the YAML named by ``BEAMCALC_CONFIG`` or fall back to the defaults."""
    path = os.getenv("BEAMCALC_CONFIG")
    if path:
        logger.info("Loading analysis defaults from %s", path)
        return load_config(path)
    return get_default_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise per-process state."""
    app.state.analysis_config = request_from_config(_initial_config())
    logger.info("Backend ready – serving beam diagrams")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="Beam Diagram API",
        version="0.1.0",
        description="Shear force, bending moment and deflection diagrams for uniformly loaded beams",
        lifespan=lifespan,
    )

    # ── CORS ───────────────────────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Register all API routes under /api ─────────────────────────────────
    application.include_router(router, prefix="/api")

    _install_access_log_filter()

    return application


class _QuietPollFilter(logging.Filter):
    """Drop uvicorn access-log records for /api/health."""

    _NOISY = ("/api/health",)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in self._NOISY)


def _install_access_log_filter() -> None:
    """Attach the filter to uvicorn's access logger (if it exists)."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.addFilter(_QuietPollFilter())


# Module-level instance used by uvicorn and tests.
app = create_app()
