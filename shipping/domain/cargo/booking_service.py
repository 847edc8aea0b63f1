"""
Default booking service.

Implements the BookingService port on top of repository ports.
Validates input, applies cargo state transitions, and assembles
read models. Candidate itineraries come from the RoutingService port;
no route search happens here.
"""

import logging
from datetime import datetime
from typing import Optional

from shipping.domain.cargo.entities import (
    Cargo,
    CargoEvent,
    CargoView,
    HandlingEvent,
    HandlingEventType,
    Itinerary,
    Location,
    RouteSpecification,
    RoutingStatus,
    TrackingID,
    UNLocode,
    next_tracking_id,
)
from shipping.domain.cargo.errors import InvalidArgumentError, ShippingError
from shipping.domain.cargo.ports import (
    BookingService,
    CargoRepository,
    HandlingEventRepository,
    LocationRepository,
    RoutingService,
)

logger = logging.getLogger(__name__)

_EVENT_TEMPLATES = {
    HandlingEventType.LOAD: "Loaded onto voyage {voyage} in {location}, at {time}.",
    HandlingEventType.UNLOAD: "Unloaded off voyage {voyage} in {location}, at {time}.",
    HandlingEventType.RECEIVE: "Received in {location}, at {time}.",
    HandlingEventType.CLAIM: "Claimed in {location}, at {time}.",
    HandlingEventType.CUSTOMS: "Cleared customs in {location}, at {time}.",
}


class DefaultBookingService(BookingService):
    """Booking service backed by cargo, location and handling repositories."""

    def __init__(
        self,
        cargos: CargoRepository,
        locations: LocationRepository,
        handling_events: HandlingEventRepository,
        routing: RoutingService,
    ) -> None:
        self._cargos = cargos
        self._locations = locations
        self._handling_events = handling_events
        self._routing = routing

    def book_new_cargo(
        self, origin: UNLocode, destination: UNLocode, deadline: Optional[datetime]
    ) -> TrackingID:
        if not origin or not destination or deadline is None:
            raise InvalidArgumentError()

        tracking_id = next_tracking_id()
        spec = RouteSpecification(
            origin=origin, destination=destination, arrival_deadline=deadline
        )
        self._cargos.store(
            Cargo(tracking_id=tracking_id, origin=origin, route_specification=spec)
        )
        logger.info(
            "Booked cargo %s from %s to %s", tracking_id, origin, destination
        )
        return tracking_id

    def load_cargo(self, tracking_id: TrackingID) -> CargoView:
        if not tracking_id:
            raise InvalidArgumentError()

        cargo = self._cargos.find(tracking_id)
        return self._assemble(cargo)

    def request_possible_routes_for_cargo(
        self, tracking_id: TrackingID
    ) -> list[Itinerary]:
        if not tracking_id:
            return []

        try:
            cargo = self._cargos.find(tracking_id)
        except ShippingError:
            return []

        return self._routing.fetch_routes_for_specification(cargo.route_specification)

    def assign_cargo_to_route(
        self, tracking_id: TrackingID, itinerary: Itinerary
    ) -> None:
        if not tracking_id or itinerary.is_empty():
            raise InvalidArgumentError()

        cargo = self._cargos.find(tracking_id)
        cargo.assign_to_route(itinerary)
        self._cargos.store(cargo)
        logger.info("Assigned cargo %s to a %d-leg route", tracking_id, len(itinerary.legs))

    def change_destination(
        self, tracking_id: TrackingID, destination: UNLocode
    ) -> None:
        if not tracking_id or not destination:
            raise InvalidArgumentError()

        cargo = self._cargos.find(tracking_id)
        location = self._locations.find(destination)

        cargo.specify_new_route(
            RouteSpecification(
                origin=cargo.origin,
                destination=location.locode,
                arrival_deadline=cargo.route_specification.arrival_deadline,
            )
        )
        self._cargos.store(cargo)
        logger.info("Changed destination of cargo %s to %s", tracking_id, destination)

    def cargos(self) -> list[CargoView]:
        return [self._assemble(cargo) for cargo in self._cargos.find_all()]

    def locations(self) -> list[Location]:
        return self._locations.find_all()

    def _assemble(self, cargo: Cargo) -> CargoView:
        history = self._handling_events.query_handling_history(cargo.tracking_id)
        return CargoView(
            tracking_id=cargo.tracking_id,
            origin=cargo.origin,
            destination=cargo.route_specification.destination,
            arrival_deadline=cargo.route_specification.arrival_deadline,
            misrouted=cargo.routing_status is RoutingStatus.MISROUTED,
            routed=not cargo.itinerary.is_empty(),
            legs=cargo.itinerary.legs,
            events=tuple(
                CargoEvent(
                    description=self._describe(event),
                    expected=cargo.itinerary.is_expected(event),
                )
                for event in history
            ),
        )

    def _describe(self, event: HandlingEvent) -> str:
        template = _EVENT_TEMPLATES.get(event.type)
        if template is None:
            return "Unknown status."

        try:
            location = self._locations.find(event.location).name
        except ShippingError:
            location = event.location

        return template.format(
            voyage=event.voyage_number,
            location=location,
            time=event.completion_time.isoformat(),
        )
