"""
Data Transfer Objects for the booking application layer.

Commands carry decoded request data into a use case. Results are the
envelopes a use case returns: each carries an optional ``err``, and when
``err`` is set no other field is meaningful.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from shipping.domain.cargo.entities import (
    CargoView,
    Itinerary,
    Location,
    TrackingID,
    UNLocode,
)
from shipping.domain.cargo.errors import ShippingError


# ------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------


@dataclass(frozen=True)
class BookCargoCommand:
    """Input DTO for booking a new cargo.

    Attributes:
        origin: Where the cargo starts its journey.
        destination: Where the cargo must be delivered.
        arrival_deadline: Latest acceptable arrival, None when not given.
    """

    origin: UNLocode
    destination: UNLocode
    arrival_deadline: Optional[datetime]


@dataclass(frozen=True)
class LoadCargoCommand:
    """Input DTO for loading a single cargo."""

    id: TrackingID


@dataclass(frozen=True)
class RequestRoutesCommand:
    """Input DTO for requesting candidate routes of a cargo."""

    id: TrackingID


@dataclass(frozen=True)
class AssignToRouteCommand:
    """Input DTO for assigning an itinerary to a cargo.

    Attributes:
        id: Tracking id of the cargo.
        itinerary: The route the cargo should follow.
    """

    id: TrackingID
    itinerary: Itinerary


@dataclass(frozen=True)
class ChangeDestinationCommand:
    """Input DTO for changing the destination of a cargo.

    Attributes:
        id: Tracking id of the cargo.
        destination: New destination location code.
    """

    id: TrackingID
    destination: UNLocode


@dataclass(frozen=True)
class ListCargosCommand:
    """Input DTO for listing all cargos. Carries no data."""


@dataclass(frozen=True)
class ListLocationsCommand:
    """Input DTO for listing all locations. Carries no data."""


# ------------------------------------------------------------------
# Result envelopes
# ------------------------------------------------------------------


@dataclass(frozen=True)
class BookCargoResult:
    tracking_id: Optional[TrackingID] = None
    err: Optional[ShippingError] = None


@dataclass(frozen=True)
class LoadCargoResult:
    cargo: Optional[CargoView] = None
    err: Optional[ShippingError] = None


@dataclass(frozen=True)
class RequestRoutesResult:
    routes: tuple[Itinerary, ...] = ()
    err: Optional[ShippingError] = None


@dataclass(frozen=True)
class AssignToRouteResult:
    err: Optional[ShippingError] = None


@dataclass(frozen=True)
class ChangeDestinationResult:
    err: Optional[ShippingError] = None


@dataclass(frozen=True)
class ListCargosResult:
    cargos: tuple[CargoView, ...] = ()
    err: Optional[ShippingError] = None


@dataclass(frozen=True)
class ListLocationsResult:
    locations: tuple[Location, ...] = ()
    err: Optional[ShippingError] = None
