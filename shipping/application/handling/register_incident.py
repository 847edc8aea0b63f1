"""
Use case: Register a handling event reported for a cargo.

Input: RegisterIncidentCommand (id, location, voyage, event_type, completion_time)
Output: RegisterIncidentResult (error only)
Side effects: Stores a handling event.
Failure cases: InvalidArgumentError, UnknownCargoError, UnknownVoyageError,
    UnknownLocationError.
"""

import logging

from shipping.application.handling.dtos import (
    RegisterIncidentCommand,
    RegisterIncidentResult,
)
from shipping.domain.cargo.errors import InternalError, ShippingError
from shipping.domain.cargo.ports import HandlingService

logger = logging.getLogger(__name__)


class RegisterIncidentUseCase:
    """Forwards a handling report to the HandlingService port."""

    def __init__(self, handling_service: HandlingService) -> None:
        self._handling_service = handling_service

    def execute(self, command: RegisterIncidentCommand) -> RegisterIncidentResult:
        """Run the registration use case.

        Args:
            command: The decoded handling report.

        Returns:
            An empty result, or one carrying the domain error.
        """
        try:
            self._handling_service.register_handling_event(
                command.completion_time,
                command.id,
                command.voyage,
                command.location,
                command.event_type,
            )
        except ShippingError as exc:
            logger.warning(
                "Handling event for %s rejected: %s", command.id, exc.message
            )
            return RegisterIncidentResult(err=exc)
        except Exception as exc:
            logger.exception("Handling event for %s failed", command.id)
            return RegisterIncidentResult(err=InternalError.from_exception(exc))

        return RegisterIncidentResult()
