"""
Use case: Book a new cargo.

Input: BookCargoCommand (origin, destination, arrival_deadline)
Output: BookCargoResult carrying the new tracking id
Side effects: Stores a new cargo.
Failure cases: InvalidArgumentError (carried in the result).
"""

import logging

from shipping.application.booking.dtos import BookCargoCommand, BookCargoResult
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import BookingService

logger = logging.getLogger(__name__)


class BookCargoUseCase:
    """Books a cargo through the BookingService port."""

    def __init__(self, booking_service: BookingService) -> None:
        self._booking_service = booking_service

    def execute(self, command: BookCargoCommand) -> BookCargoResult:
        """Run the booking use case.

        Args:
            command: The booking request.

        Returns:
            The new tracking id, or the domain error that prevented booking.
        """
        try:
            tracking_id = self._booking_service.book_new_cargo(
                command.origin,
                command.destination,
                command.arrival_deadline,
            )
        except ShippingError as exc:
            logger.warning("Booking rejected: %s", exc.message)
            return BookCargoResult(err=exc)
        except Exception as exc:
            logger.exception("Booking failed")
            return BookCargoResult(err=InternalError.from_exception(exc))

        return BookCargoResult(tracking_id=tracking_id)
