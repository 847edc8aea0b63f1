"""
Default handling service.

Validates a handling report, checks that the cargo, voyage and
location it refers to exist, and records the event.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from shipping.domain.cargo.entities import (
    HandlingEvent,
    HandlingEventType,
    TrackingID,
    UNLocode,
    VoyageNumber,
)
from shipping.domain.cargo.errors import InvalidArgumentError
from shipping.domain.cargo.ports import (
    CargoRepository,
    HandlingEventRepository,
    HandlingService,
    LocationRepository,
    VoyageRepository,
)

logger = logging.getLogger(__name__)


class DefaultHandlingService(HandlingService):
    """Handling service backed by repository ports."""

    def __init__(
        self,
        handling_events: HandlingEventRepository,
        cargos: CargoRepository,
        voyages: VoyageRepository,
        locations: LocationRepository,
    ) -> None:
        self._handling_events = handling_events
        self._cargos = cargos
        self._voyages = voyages
        self._locations = locations

    def register_handling_event(
        self,
        completion_time: Optional[datetime],
        tracking_id: TrackingID,
        voyage_number: VoyageNumber,
        location: UNLocode,
        event_type: HandlingEventType,
    ) -> None:
        """Record that a cargo was handled.

        Raises:
            InvalidArgumentError: If time, id or location is missing, or
                the event type is NOT_HANDLED.
            UnknownCargoError: If the cargo does not exist.
            UnknownVoyageError: If a voyage is given and does not exist.
            UnknownLocationError: If the location does not exist.
        """
        if (
            completion_time is None
            or not tracking_id
            or not location
            or event_type is HandlingEventType.NOT_HANDLED
        ):
            raise InvalidArgumentError()

        self._cargos.find(tracking_id)
        if voyage_number:
            self._voyages.find(voyage_number)
        self._locations.find(location)

        event = HandlingEvent(
            tracking_id=tracking_id,
            type=event_type,
            location=location,
            completion_time=completion_time,
            registration_time=datetime.now(timezone.utc),
            voyage_number=voyage_number,
        )
        self._handling_events.store(event)
        logger.info(
            "Registered %s event for cargo %s at %s",
            event_type.value,
            tracking_id,
            location,
        )
