"""
Data Transfer Objects for the handling application layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from shipping.domain.cargo.entities import (
    HandlingEventType,
    TrackingID,
    UNLocode,
    VoyageNumber,
)
from shipping.domain.cargo.errors import ShippingError


@dataclass(frozen=True)
class RegisterIncidentCommand:
    """Input DTO for reporting that a cargo was handled.

    Attributes:
        id: Tracking id of the handled cargo.
        location: Where the handling took place.
        voyage: Voyage involved, empty for events without a voyage.
        event_type: What happened to the cargo.
        completion_time: When the handling was completed, None when not given.
    """

    id: TrackingID
    location: UNLocode
    voyage: VoyageNumber
    event_type: HandlingEventType
    completion_time: Optional[datetime]


@dataclass(frozen=True)
class RegisterIncidentResult:
    err: Optional[ShippingError] = None
