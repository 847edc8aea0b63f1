"""
Use case: List every known location.
"""

import logging

from shipping.application.booking.dtos import (
    ListLocationsCommand,
    ListLocationsResult,
)
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import BookingService

logger = logging.getLogger(__name__)


class ListLocationsUseCase:
    def __init__(self, booking_service: BookingService) -> None:
        self._booking_service = booking_service

    def execute(self, command: ListLocationsCommand) -> ListLocationsResult:
        try:
            locations = self._booking_service.locations()
        except ShippingError as exc:
            return ListLocationsResult(err=exc)
        except Exception as exc:
            logger.exception("Listing locations failed")
            return ListLocationsResult(err=InternalError.from_exception(exc))

        return ListLocationsResult(locations=tuple(locations))
