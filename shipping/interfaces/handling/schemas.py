"""
Pydantic schemas for the handling API wire format.
"""

from typing import Optional

from pydantic import AwareDatetime, BaseModel

from shipping.interfaces.decoding import NullableStr


class RegisterIncidentRequest(BaseModel):
    """Body of POST /handling/v1/incidents.

    Attributes:
        id: Tracking id of the handled cargo.
        location: UN/LOCODE where the handling happened.
        voyage: Voyage number, empty when no voyage is involved.
        event_type: One of Load, Unload, Receive, Claim, Customs.
        completion_time: When the handling was completed.
    """

    id: NullableStr = ""
    location: NullableStr = ""
    voyage: NullableStr = ""
    event_type: NullableStr = ""
    completion_time: Optional[AwareDatetime] = None


class RegisterIncidentResponse(BaseModel):
    """Success body: carries nothing."""
