"""
Port interfaces (ABCs) for the cargo shipping bounded context.

The booking and handling services are the capabilities the HTTP layer
consumes. Repositories and the routing service are what the default
service implementations require from infrastructure.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from shipping.domain.cargo.entities import (
    Cargo,
    CargoView,
    HandlingEvent,
    HandlingEventType,
    Itinerary,
    Location,
    RouteSpecification,
    TrackingID,
    UNLocode,
    Voyage,
    VoyageNumber,
)


class BookingService(ABC):
    """Port for booking and routing cargo.

    Every method raises ShippingError on failure.
    """

    @abstractmethod
    def book_new_cargo(
        self, origin: UNLocode, destination: UNLocode, deadline: Optional[datetime]
    ) -> TrackingID:
        """Register a new cargo and return its tracking id."""
        raise NotImplementedError

    @abstractmethod
    def load_cargo(self, tracking_id: TrackingID) -> CargoView:
        """Return the read model of a cargo."""
        raise NotImplementedError

    @abstractmethod
    def request_possible_routes_for_cargo(
        self, tracking_id: TrackingID
    ) -> list[Itinerary]:
        """Return candidate itineraries that satisfy the cargo's route."""
        raise NotImplementedError

    @abstractmethod
    def assign_cargo_to_route(
        self, tracking_id: TrackingID, itinerary: Itinerary
    ) -> None:
        """Assign an itinerary to a cargo."""
        raise NotImplementedError

    @abstractmethod
    def change_destination(
        self, tracking_id: TrackingID, destination: UNLocode
    ) -> None:
        """Change the destination of a cargo."""
        raise NotImplementedError

    @abstractmethod
    def cargos(self) -> list[CargoView]:
        """Return read models of all booked cargos."""
        raise NotImplementedError

    @abstractmethod
    def locations(self) -> list[Location]:
        """Return all known locations."""
        raise NotImplementedError


class HandlingService(ABC):
    """Port for registering handling events."""

    @abstractmethod
    def register_handling_event(
        self,
        completion_time: Optional[datetime],
        tracking_id: TrackingID,
        voyage_number: VoyageNumber,
        location: UNLocode,
        event_type: HandlingEventType,
    ) -> None:
        """Record that a cargo was handled."""
        raise NotImplementedError


class RoutingService(ABC):
    """Port for finding itineraries that satisfy a route specification."""

    @abstractmethod
    def fetch_routes_for_specification(
        self, route_specification: RouteSpecification
    ) -> list[Itinerary]:
        raise NotImplementedError


class CargoRepository(ABC):
    """Port for persisting and retrieving cargos."""

    @abstractmethod
    def store(self, cargo: Cargo) -> None:
        raise NotImplementedError

    @abstractmethod
    def find(self, tracking_id: TrackingID) -> Cargo:
        """Return the cargo, or raise UnknownCargoError."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Cargo]:
        raise NotImplementedError


class LocationRepository(ABC):
    """Port for looking up locations."""

    @abstractmethod
    def find(self, locode: UNLocode) -> Location:
        """Return the location, or raise UnknownLocationError."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Location]:
        raise NotImplementedError


class VoyageRepository(ABC):
    """Port for looking up scheduled voyages."""

    @abstractmethod
    def find(self, voyage_number: VoyageNumber) -> Voyage:
        """Return the voyage, or raise UnknownVoyageError."""
        raise NotImplementedError


class HandlingEventRepository(ABC):
    """Port for persisting and querying handling events."""

    @abstractmethod
    def store(self, event: HandlingEvent) -> None:
        raise NotImplementedError

    @abstractmethod
    def query_handling_history(self, tracking_id: TrackingID) -> list[HandlingEvent]:
        """Return the events of a cargo, ordered by completion time."""
        raise NotImplementedError
