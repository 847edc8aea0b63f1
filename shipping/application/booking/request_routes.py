"""
Use case: Request candidate itineraries for a cargo.

Input: RequestRoutesCommand (id)
Output: RequestRoutesResult
Side effects: None.
"""

import logging

from shipping.application.booking.dtos import (
    RequestRoutesCommand,
    RequestRoutesResult,
)
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import BookingService

logger = logging.getLogger(__name__)


class RequestRoutesUseCase:
    """Asks the BookingService port for routes matching a cargo's specification."""

    def __init__(self, booking_service: BookingService) -> None:
        self._booking_service = booking_service

    def execute(self, command: RequestRoutesCommand) -> RequestRoutesResult:
        try:
            routes = self._booking_service.request_possible_routes_for_cargo(command.id)
        except ShippingError as exc:
            logger.warning("Route request for %s failed: %s", command.id, exc.message)
            return RequestRoutesResult(err=exc)
        except Exception as exc:
            logger.exception("Route request for %s failed", command.id)
            return RequestRoutesResult(err=InternalError.from_exception(exc))

        logger.info("Found %d candidate routes for cargo %s", len(routes), command.id)
        return RequestRoutesResult(routes=tuple(routes))
