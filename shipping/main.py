"""
Application entry point.

Creates the FastAPI application and wires together:
- Domain services (in-memory adapters unless others are given)
- Operation tables for the booking and handling APIs
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from shipping.core.config import Settings, settings as default_settings
from shipping.domain.cargo.booking_service import DefaultBookingService
from shipping.domain.cargo.handling_service import DefaultHandlingService
from shipping.domain.cargo.ports import BookingService, HandlingService
from shipping.infrastructure.cargo.inmem import (
    InMemoryCargoRepository,
    InMemoryHandlingEventRepository,
    InMemoryLocationRepository,
    InMemoryVoyageRepository,
    StaticRoutingService,
)
from shipping.interfaces.booking.router import DOCS_PATH, booking_operations
from shipping.interfaces.handling.router import handling_operations
from shipping.interfaces.health import build_health_router
from shipping.interfaces.operations import mount_operations
from shipping.shared.errors.handlers import make_error_encoder, register_error_handlers
from shipping.shared.logging import configure_logging
from shipping.shared.security.headers import SecurityHeadersMiddleware
from shipping.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def build_in_memory_services() -> tuple[BookingService, HandlingService]:
    """Wire the default services onto shared in-memory repositories."""
    cargos = InMemoryCargoRepository()
    locations = InMemoryLocationRepository()
    handling_events = InMemoryHandlingEventRepository()

    booking_service = DefaultBookingService(
        cargos=cargos,
        locations=locations,
        handling_events=handling_events,
        routing=StaticRoutingService(),
    )
    handling_service = DefaultHandlingService(
        handling_events=handling_events,
        cargos=cargos,
        voyages=InMemoryVoyageRepository(),
        locations=locations,
    )
    return booking_service, handling_service


def create_app(
    settings: Optional[Settings] = None,
    booking_service: Optional[BookingService] = None,
    handling_service: Optional[HandlingService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Operation tables are
    built here, once, and handed to the router.

    Args:
        settings: Application settings. Defaults to the environment.
        booking_service: Booking service to expose. Defaults to the
            in-memory implementation.
        handling_service: Handling service to expose. Defaults to the
            in-memory implementation sharing the booking repositories.

    Returns:
        A fully configured FastAPI application instance.
    """
    if settings is None:
        settings = default_settings
    configure_logging(level=settings.log_level)

    if booking_service is None or handling_service is None:
        default_booking, default_handling = build_in_memory_services()
        if booking_service is None:
            booking_service = default_booking
        if handling_service is None:
            handling_service = default_handling

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    encode_error = make_error_encoder(settings.client_errors_as_bad_request)
    register_error_handlers(app, encode_error)

    # --- Routers ---
    router = APIRouter()
    mount_operations(router, booking_operations(booking_service, encode_error))
    mount_operations(router, handling_operations(handling_service, encode_error))
    app.include_router(router)
    app.include_router(build_health_router(settings.version))

    if settings.booking_docs_dir:
        app.mount(
            DOCS_PATH,
            StaticFiles(directory=settings.booking_docs_dir, html=True),
            name="booking_docs",
        )

    logger.info("%s %s ready", settings.project_name, settings.version)
    return app


app = create_app()
