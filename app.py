"""
app.py — FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It wires the booking service, registers routers, and logs startup.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.controllers.booking_controller import router as booking_router
from backend.domain.constraints import AllocationConfig, validate_allocation_config
from backend.services.booking_service import BookingService
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    config: AllocationConfig | None = None,
) -> FastAPI:
    """
    Build and wire the FastAPI application.

    The booking service is the only stateful dependency; it is stored on
    app.state and resolved by the controller dependency providers.
    """
    resolved_settings = settings or get_settings()
    booking_service = BookingService(settings=resolved_settings, config=config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Validate allocation policy before accepting requests."""
        _startup(app)
        yield

    app = FastAPI(
        title=resolved_settings.app_name,
        version=resolved_settings.app_version,
        lifespan=lifespan,
    )

    # --- Routers ---
    app.include_router(booking_router)

    # --- Inject services into app.state for dependency resolution ---
    app.state.booking_service = booking_service

    return app


def _startup(app: FastAPI) -> None:
    booking_service: BookingService = app.state.booking_service
    validate_allocation_config(booking_service.config)
    stats = booking_service.state.status_counts()
    logger.info(
        "Startup complete | rooms=%s | max_rooms_per_booking=%s | candidate_pool_size=%s",
        stats["total"],
        booking_service.config.max_rooms_per_booking,
        booking_service.config.candidate_pool_size,
    )


# Module-level app object for uvicorn
app = create_app()
