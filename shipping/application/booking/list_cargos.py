"""
Use case: List every booked cargo.
"""

import logging

from shipping.application.booking.dtos import ListCargosCommand, ListCargosResult
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import BookingService

logger = logging.getLogger(__name__)


class ListCargosUseCase:
    def __init__(self, booking_service: BookingService) -> None:
        self._booking_service = booking_service

    def execute(self, command: ListCargosCommand) -> ListCargosResult:
        try:
            cargos = self._booking_service.cargos()
        except ShippingError as exc:
            return ListCargosResult(err=exc)
        except Exception as exc:
            logger.exception("Listing cargos failed")
            return ListCargosResult(err=InternalError.from_exception(exc))

        return ListCargosResult(cargos=tuple(cargos))
