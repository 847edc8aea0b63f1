"""
Command decoders for the booking API.

Each decoder is a pure function of the path parameters and the raw body.
Operations addressing a cargo check the ``{id}`` parameter before
looking at the body, so a missing identifier is always a bad route.
"""

from typing import Mapping

from shipping.application.booking.dtos import (
    AssignToRouteCommand,
    BookCargoCommand,
    ChangeDestinationCommand,
    ListCargosCommand,
    ListLocationsCommand,
    LoadCargoCommand,
    RequestRoutesCommand,
)
from shipping.domain.cargo.entities import (
    Itinerary,
    Leg,
    UNLocode,
    VoyageNumber,
)
from shipping.interfaces.booking.schemas import (
    BookCargoRequest,
    ChangeDestinationRequest,
    ItinerarySchema,
    LegSchema,
)
from shipping.interfaces.decoding import parse_body, tracking_id_from_path


def decode_book_cargo(
    _path_params: Mapping[str, str], body: bytes
) -> BookCargoCommand:
    request = parse_body(BookCargoRequest, body)
    return BookCargoCommand(
        origin=UNLocode(request.origin),
        destination=UNLocode(request.destination),
        arrival_deadline=request.arrival_deadline,
    )


def decode_load_cargo(
    path_params: Mapping[str, str], _body: bytes
) -> LoadCargoCommand:
    return LoadCargoCommand(id=tracking_id_from_path(path_params))


def decode_request_routes(
    path_params: Mapping[str, str], _body: bytes
) -> RequestRoutesCommand:
    return RequestRoutesCommand(id=tracking_id_from_path(path_params))


def decode_assign_to_route(
    path_params: Mapping[str, str], body: bytes
) -> AssignToRouteCommand:
    tracking_id = tracking_id_from_path(path_params)
    request = parse_body(ItinerarySchema, body)
    return AssignToRouteCommand(
        id=tracking_id,
        itinerary=Itinerary(legs=tuple(_leg(leg) for leg in request.legs)),
    )


def decode_change_destination(
    path_params: Mapping[str, str], body: bytes
) -> ChangeDestinationCommand:
    tracking_id = tracking_id_from_path(path_params)
    request = parse_body(ChangeDestinationRequest, body)
    return ChangeDestinationCommand(
        id=tracking_id,
        destination=UNLocode(request.destination),
    )


def decode_list_cargos(
    _path_params: Mapping[str, str], _body: bytes
) -> ListCargosCommand:
    return ListCargosCommand()


def decode_list_locations(
    _path_params: Mapping[str, str], _body: bytes
) -> ListLocationsCommand:
    return ListLocationsCommand()


def _leg(schema: LegSchema) -> Leg:
    return Leg(
        voyage_number=VoyageNumber(schema.voyage_number),
        load_location=UNLocode(schema.load_location),
        unload_location=UNLocode(schema.unload_location),
        load_time=schema.load_time,
        unload_time=schema.unload_time,
    )
