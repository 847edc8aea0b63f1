"""
Domain entities and value objects for the cargo shipping context.

Identifiers are opaque string types: they are built directly from wire
strings and never validated here. Entities contain no framework imports
and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import NewType, Optional
from uuid import uuid4

TrackingID = NewType("TrackingID", str)
UNLocode = NewType("UNLocode", str)
VoyageNumber = NewType("VoyageNumber", str)


def next_tracking_id() -> TrackingID:
    """Generate a new, practically unique tracking id."""
    return TrackingID(str(uuid4()).split("-")[0].upper())


class HandlingEventType(Enum):
    """Kind of activity recorded by a handling event."""

    NOT_HANDLED = "NotHandled"
    LOAD = "Load"
    UNLOAD = "Unload"
    RECEIVE = "Receive"
    CLAIM = "Claim"
    CUSTOMS = "Customs"

    @classmethod
    def parse(cls, value: str) -> "HandlingEventType":
        """Map a wire string to an event type, NOT_HANDLED when unrecognized."""
        for member in cls:
            if member.value == value:
                return member
        return cls.NOT_HANDLED


class RoutingStatus(Enum):
    """Whether a cargo's itinerary satisfies its route specification."""

    NOT_ROUTED = "not_routed"
    MISROUTED = "misrouted"
    ROUTED = "routed"


@dataclass(frozen=True)
class Location:
    """A port or other location identified by its UN/LOCODE."""

    locode: UNLocode
    name: str


@dataclass(frozen=True)
class Voyage:
    """A scheduled voyage, identified by its voyage number."""

    number: VoyageNumber


@dataclass(frozen=True)
class Leg:
    """One transport leg of an itinerary."""

    voyage_number: VoyageNumber
    load_location: UNLocode
    unload_location: UNLocode
    load_time: datetime
    unload_time: datetime


@dataclass(frozen=True)
class HandlingEvent:
    """A recorded handling of a cargo at a location, possibly on a voyage."""

    tracking_id: TrackingID
    type: HandlingEventType
    location: UNLocode
    completion_time: datetime
    registration_time: datetime
    voyage_number: VoyageNumber = VoyageNumber("")


@dataclass(frozen=True)
class Itinerary:
    """Ordered sequence of legs assigned to a cargo."""

    legs: tuple[Leg, ...] = ()

    def is_empty(self) -> bool:
        return not self.legs

    @property
    def initial_departure_location(self) -> Optional[UNLocode]:
        return self.legs[0].load_location if self.legs else None

    @property
    def final_arrival_location(self) -> Optional[UNLocode]:
        return self.legs[-1].unload_location if self.legs else None

    @property
    def final_arrival_time(self) -> Optional[datetime]:
        return self.legs[-1].unload_time if self.legs else None

    def is_expected(self, event: HandlingEvent) -> bool:
        """Return True if the event fits the plan laid out by this itinerary.

        An empty itinerary expects everything. Customs clearance may happen
        anywhere, so it is always expected.
        """
        if self.is_empty():
            return True

        if event.type is HandlingEventType.RECEIVE:
            return self.legs[0].load_location == event.location
        if event.type is HandlingEventType.LOAD:
            return any(
                leg.load_location == event.location
                and leg.voyage_number == event.voyage_number
                for leg in self.legs
            )
        if event.type is HandlingEventType.UNLOAD:
            return any(
                leg.unload_location == event.location
                and leg.voyage_number == event.voyage_number
                for leg in self.legs
            )
        if event.type is HandlingEventType.CLAIM:
            return self.legs[-1].unload_location == event.location
        return True


@dataclass(frozen=True)
class RouteSpecification:
    """Where a cargo must go and when it must arrive."""

    origin: UNLocode
    destination: UNLocode
    arrival_deadline: datetime

    def is_satisfied_by(self, itinerary: Itinerary) -> bool:
        if itinerary.is_empty():
            return False
        return (
            itinerary.initial_departure_location == self.origin
            and itinerary.final_arrival_location == self.destination
            and itinerary.final_arrival_time <= self.arrival_deadline
        )


@dataclass
class Cargo:
    """Aggregate root: a shipment tracked by its tracking id.

    The origin is fixed at booking time; the route specification and
    itinerary may change over the cargo's life.
    """

    tracking_id: TrackingID
    origin: UNLocode
    route_specification: RouteSpecification
    itinerary: Itinerary = field(default_factory=Itinerary)

    @property
    def routing_status(self) -> RoutingStatus:
        if self.itinerary.is_empty():
            return RoutingStatus.NOT_ROUTED
        if self.route_specification.is_satisfied_by(self.itinerary):
            return RoutingStatus.ROUTED
        return RoutingStatus.MISROUTED

    def specify_new_route(self, route_specification: RouteSpecification) -> None:
        self.route_specification = route_specification

    def assign_to_route(self, itinerary: Itinerary) -> None:
        self.itinerary = itinerary


@dataclass(frozen=True)
class CargoEvent:
    """Human-readable entry in a cargo's handling history."""

    description: str
    expected: bool


@dataclass(frozen=True)
class CargoView:
    """Read model of a cargo, assembled with its handling history."""

    tracking_id: TrackingID
    origin: UNLocode
    destination: UNLocode
    arrival_deadline: datetime
    misrouted: bool
    routed: bool
    legs: tuple[Leg, ...] = ()
    events: tuple[CargoEvent, ...] = ()
