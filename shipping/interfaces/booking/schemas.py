"""
Pydantic schemas for the booking API wire format.

Request bodies are parsed structurally: missing or null string fields
default to empty and a missing deadline to None, leaving it to the
booking service to reject them. Timestamps must carry a UTC offset.
"""

from datetime import datetime
from typing import Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from shipping.interfaces.decoding import NullableList, NullableStr


class LegSchema(BaseModel):
    """A single leg of an itinerary, both in requests and responses."""

    model_config = ConfigDict(populate_by_name=True)

    voyage_number: NullableStr = ""
    load_location: NullableStr = Field(default="", alias="from")
    unload_location: NullableStr = Field(default="", alias="to")
    load_time: AwareDatetime
    unload_time: AwareDatetime


class ItinerarySchema(BaseModel):
    legs: NullableList[LegSchema] = Field(default_factory=list)


class BookCargoRequest(BaseModel):
    """Body of POST /booking/v1/cargos."""

    origin: NullableStr = ""
    destination: NullableStr = ""
    arrival_deadline: Optional[AwareDatetime] = None


class ChangeDestinationRequest(BaseModel):
    """Body of POST /booking/v1/cargos/{id}/change_destination."""

    destination: NullableStr = ""


class EventSchema(BaseModel):
    description: str
    expected: bool


class CargoSchema(BaseModel):
    """Read model of a cargo."""

    tracking_id: str
    origin: str
    destination: str
    arrival_deadline: datetime
    misrouted: bool
    routed: bool
    legs: list[LegSchema]
    events: list[EventSchema]


class LocationSchema(BaseModel):
    locode: str
    name: str


class BookCargoResponse(BaseModel):
    tracking_id: str


class LoadCargoResponse(BaseModel):
    cargo: CargoSchema


class RequestRoutesResponse(BaseModel):
    routes: list[ItinerarySchema]


class ListCargosResponse(BaseModel):
    cargos: list[CargoSchema]


class ListLocationsResponse(BaseModel):
    locations: list[LocationSchema]


class EmptyResponse(BaseModel):
    """Success body of operations that return nothing but an error."""
