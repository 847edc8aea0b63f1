"""
Use case: Change the destination of a cargo.

Input: ChangeDestinationCommand (id, destination)
Output: ChangeDestinationResult (error only)
Side effects: Replaces the cargo's route specification.
Failure cases: InvalidArgumentError, UnknownCargoError, UnknownLocationError.
"""

import logging

from shipping.application.booking.dtos import (
    ChangeDestinationCommand,
    ChangeDestinationResult,
)
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import BookingService

logger = logging.getLogger(__name__)


class ChangeDestinationUseCase:
    def __init__(self, booking_service: BookingService) -> None:
        self._booking_service = booking_service

    def execute(self, command: ChangeDestinationCommand) -> ChangeDestinationResult:
        try:
            self._booking_service.change_destination(command.id, command.destination)
        except ShippingError as exc:
            logger.warning(
                "Destination change for %s failed: %s", command.id, exc.message
            )
            return ChangeDestinationResult(err=exc)
        except Exception as exc:
            logger.exception("Destination change for %s failed", command.id)
            return ChangeDestinationResult(err=InternalError.from_exception(exc))

        return ChangeDestinationResult()
