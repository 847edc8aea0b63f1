"""
Use case: Assign an itinerary to a cargo.

Input: AssignToRouteCommand (id, itinerary)
Output: AssignToRouteResult (error only)
Side effects: Replaces the cargo's itinerary.
Failure cases: InvalidArgumentError, UnknownCargoError.
"""

import logging

from shipping.application.booking.dtos import (
    AssignToRouteCommand,
    AssignToRouteResult,
)
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import BookingService

logger = logging.getLogger(__name__)


class AssignToRouteUseCase:
    def __init__(self, booking_service: BookingService) -> None:
        self._booking_service = booking_service

    def execute(self, command: AssignToRouteCommand) -> AssignToRouteResult:
        try:
            self._booking_service.assign_cargo_to_route(command.id, command.itinerary)
        except ShippingError as exc:
            logger.warning("Route assignment for %s failed: %s", command.id, exc.message)
            return AssignToRouteResult(err=exc)
        except Exception as exc:
            logger.exception("Route assignment for %s failed", command.id)
            return AssignToRouteResult(err=InternalError.from_exception(exc))

        return AssignToRouteResult()
