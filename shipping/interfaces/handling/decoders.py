"""
Command decoder for the handling API.
"""

from typing import Mapping

from shipping.application.handling.dtos import RegisterIncidentCommand
from shipping.domain.cargo.entities import (
    HandlingEventType,
    TrackingID,
    UNLocode,
    VoyageNumber,
)
from shipping.interfaces.decoding import parse_body
from shipping.interfaces.handling.schemas import RegisterIncidentRequest


def decode_register_incident(
    _path_params: Mapping[str, str], body: bytes
) -> RegisterIncidentCommand:
    """Decode a handling report.

    Unrecognized event types decode to NOT_HANDLED; the handling
    service rejects them.
    """
    request = parse_body(RegisterIncidentRequest, body)
    return RegisterIncidentCommand(
        id=TrackingID(request.id),
        location=UNLocode(request.location),
        voyage=VoyageNumber(request.voyage),
        event_type=HandlingEventType.parse(request.event_type),
        completion_time=request.completion_time,
    )
