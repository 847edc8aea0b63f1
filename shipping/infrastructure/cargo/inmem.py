"""
In-memory adapters for the cargo shipping ports.

Each repository keeps its state in a dict guarded by a lock, so the
adapters can be shared by requests served from concurrent worker
threads. Cargos are copied on the way in and out; callers never hold
a reference to stored state.
"""

import threading
from dataclasses import replace
from typing import Iterable, Optional

from shipping.domain.cargo.entities import (
    Cargo,
    HandlingEvent,
    Itinerary,
    Location,
    RouteSpecification,
    TrackingID,
    UNLocode,
    Voyage,
    VoyageNumber,
)
from shipping.domain.cargo.errors import (
    UnknownCargoError,
    UnknownLocationError,
    UnknownVoyageError,
)
from shipping.domain.cargo.ports import (
    CargoRepository,
    HandlingEventRepository,
    LocationRepository,
    RoutingService,
    VoyageRepository,
)

SAMPLE_LOCATIONS = (
    Location(UNLocode("SESTO"), "Stockholm"),
    Location(UNLocode("AUMEL"), "Melbourne"),
    Location(UNLocode("CNHKG"), "Hongkong"),
    Location(UNLocode("USNYC"), "New York"),
    Location(UNLocode("USCHI"), "Chicago"),
    Location(UNLocode("JNTKO"), "Tokyo"),
    Location(UNLocode("DEHAM"), "Hamburg"),
    Location(UNLocode("NLRTM"), "Rotterdam"),
    Location(UNLocode("FIHEL"), "Helsinki"),
)

SAMPLE_VOYAGES = (
    Voyage(VoyageNumber("V100")),
    Voyage(VoyageNumber("V300")),
    Voyage(VoyageNumber("V400")),
    Voyage(VoyageNumber("0100S")),
    Voyage(VoyageNumber("0200T")),
    Voyage(VoyageNumber("0300A")),
    Voyage(VoyageNumber("0301S")),
    Voyage(VoyageNumber("0400S")),
)


class InMemoryCargoRepository(CargoRepository):
    """Cargo repository backed by a dict keyed on tracking id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cargos: dict[TrackingID, Cargo] = {}

    def store(self, cargo: Cargo) -> None:
        with self._lock:
            self._cargos[cargo.tracking_id] = replace(cargo)

    def find(self, tracking_id: TrackingID) -> Cargo:
        with self._lock:
            cargo = self._cargos.get(tracking_id)
        if cargo is None:
            raise UnknownCargoError(tracking_id)
        return replace(cargo)

    def find_all(self) -> list[Cargo]:
        with self._lock:
            return [replace(cargo) for cargo in self._cargos.values()]


class InMemoryLocationRepository(LocationRepository):
    """Read-only location repository seeded at construction."""

    def __init__(self, locations: Iterable[Location] = SAMPLE_LOCATIONS) -> None:
        self._locations = {location.locode: location for location in locations}

    def find(self, locode: UNLocode) -> Location:
        location = self._locations.get(locode)
        if location is None:
            raise UnknownLocationError(locode)
        return location

    def find_all(self) -> list[Location]:
        return list(self._locations.values())


class InMemoryVoyageRepository(VoyageRepository):
    """Read-only voyage repository seeded at construction."""

    def __init__(self, voyages: Iterable[Voyage] = SAMPLE_VOYAGES) -> None:
        self._voyages = {voyage.number: voyage for voyage in voyages}

    def find(self, voyage_number: VoyageNumber) -> Voyage:
        voyage = self._voyages.get(voyage_number)
        if voyage is None:
            raise UnknownVoyageError(voyage_number)
        return voyage


class InMemoryHandlingEventRepository(HandlingEventRepository):
    """Handling event log grouped by tracking id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events: dict[TrackingID, list[HandlingEvent]] = {}

    def store(self, event: HandlingEvent) -> None:
        with self._lock:
            self._events.setdefault(event.tracking_id, []).append(event)

    def query_handling_history(self, tracking_id: TrackingID) -> list[HandlingEvent]:
        with self._lock:
            events = list(self._events.get(tracking_id, ()))
        return sorted(events, key=lambda e: e.completion_time)


class StaticRoutingService(RoutingService):
    """Routing adapter returning a fixed list of candidate itineraries.

    With no itineraries configured it proposes nothing; a real routing
    backend plugs in through the same port.
    """

    def __init__(self, itineraries: Optional[Iterable[Itinerary]] = None) -> None:
        self._itineraries = tuple(itineraries or ())

    def fetch_routes_for_specification(
        self, route_specification: RouteSpecification
    ) -> list[Itinerary]:
        return [
            itinerary
            for itinerary in self._itineraries
            if route_specification.is_satisfied_by(itinerary)
        ]
