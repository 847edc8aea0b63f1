"""
Use case: Load the read model of a single cargo.

Input: LoadCargoCommand (id)
Output: LoadCargoResult
Side effects: None.
Failure cases: InvalidArgumentError, UnknownCargoError.
"""

import logging

from shipping.application.booking.dtos import LoadCargoCommand, LoadCargoResult
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import BookingService

logger = logging.getLogger(__name__)


class LoadCargoUseCase:
    """Fetches one cargo from the BookingService port."""

    def __init__(self, booking_service: BookingService) -> None:
        self._booking_service = booking_service

    def execute(self, command: LoadCargoCommand) -> LoadCargoResult:
        try:
            cargo = self._booking_service.load_cargo(command.id)
        except ShippingError as exc:
            logger.warning("Could not load cargo %s: %s", command.id, exc.message)
            return LoadCargoResult(err=exc)
        except Exception as exc:
            logger.exception("Could not load cargo %s", command.id)
            return LoadCargoResult(err=InternalError.from_exception(exc))

        return LoadCargoResult(cargo=cargo)
