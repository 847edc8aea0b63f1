"""
Operation table for the booking API.

Maps each booking route to its decoder, use case and response schema.
The table is built once per application from a BookingService.
"""

from shipping.application.booking.assign_to_route import AssignToRouteUseCase
from shipping.application.booking.book_cargo import BookCargoUseCase
from shipping.application.booking.change_destination import ChangeDestinationUseCase
from shipping.application.booking.dtos import (
    BookCargoResult,
    ListCargosResult,
    ListLocationsResult,
    LoadCargoResult,
    RequestRoutesResult,
)
from shipping.application.booking.list_cargos import ListCargosUseCase
from shipping.application.booking.list_locations import ListLocationsUseCase
from shipping.application.booking.load_cargo import LoadCargoUseCase
from shipping.application.booking.request_routes import RequestRoutesUseCase
from shipping.domain.cargo.entities import CargoView, Itinerary, Leg, Location
from shipping.domain.cargo.ports import BookingService
from shipping.interfaces.booking import decoders
from shipping.interfaces.booking.schemas import (
    BookCargoResponse,
    CargoSchema,
    EmptyResponse,
    EventSchema,
    ItinerarySchema,
    LegSchema,
    ListCargosResponse,
    ListLocationsResponse,
    LoadCargoResponse,
    LocationSchema,
    RequestRoutesResponse,
)
from shipping.interfaces.operations import Operation, make_response_encoder
from shipping.shared.errors.handlers import ErrorEncoder

PREFIX = "/booking/v1"
DOCS_PATH = f"{PREFIX}/docs"


def booking_operations(
    booking_service: BookingService, encode_error: ErrorEncoder
) -> tuple[Operation, ...]:
    """Build the booking operation table.

    Args:
        booking_service: The service every use case calls.
        encode_error: Encoder for errors carried in result envelopes.

    Returns:
        One Operation per booking route.
    """
    return (
        Operation(
            name="book_cargo",
            method="POST",
            path=f"{PREFIX}/cargos",
            decode=decoders.decode_book_cargo,
            invoke=BookCargoUseCase(booking_service).execute,
            encode=make_response_encoder(_book_cargo_response, encode_error),
        ),
        Operation(
            name="list_cargos",
            method="GET",
            path=f"{PREFIX}/cargos",
            decode=decoders.decode_list_cargos,
            invoke=ListCargosUseCase(booking_service).execute,
            encode=make_response_encoder(_list_cargos_response, encode_error),
        ),
        Operation(
            name="load_cargo",
            method="GET",
            path=f"{PREFIX}/cargos/{{id}}",
            decode=decoders.decode_load_cargo,
            invoke=LoadCargoUseCase(booking_service).execute,
            encode=make_response_encoder(_load_cargo_response, encode_error),
        ),
        Operation(
            name="request_routes",
            method="GET",
            path=f"{PREFIX}/cargos/{{id}}/request_routes",
            decode=decoders.decode_request_routes,
            invoke=RequestRoutesUseCase(booking_service).execute,
            encode=make_response_encoder(_request_routes_response, encode_error),
        ),
        Operation(
            name="assign_to_route",
            method="POST",
            path=f"{PREFIX}/cargos/{{id}}/assign_to_route",
            decode=decoders.decode_assign_to_route,
            invoke=AssignToRouteUseCase(booking_service).execute,
            encode=make_response_encoder(_empty_response, encode_error),
        ),
        Operation(
            name="change_destination",
            method="POST",
            path=f"{PREFIX}/cargos/{{id}}/change_destination",
            decode=decoders.decode_change_destination,
            invoke=ChangeDestinationUseCase(booking_service).execute,
            encode=make_response_encoder(_empty_response, encode_error),
        ),
        Operation(
            name="list_locations",
            method="GET",
            path=f"{PREFIX}/locations",
            decode=decoders.decode_list_locations,
            invoke=ListLocationsUseCase(booking_service).execute,
            encode=make_response_encoder(_list_locations_response, encode_error),
        ),
    )


def _book_cargo_response(result: BookCargoResult) -> BookCargoResponse:
    return BookCargoResponse(tracking_id=result.tracking_id)


def _load_cargo_response(result: LoadCargoResult) -> LoadCargoResponse:
    return LoadCargoResponse(cargo=_cargo(result.cargo))


def _request_routes_response(result: RequestRoutesResult) -> RequestRoutesResponse:
    return RequestRoutesResponse(routes=[_itinerary(r) for r in result.routes])


def _list_cargos_response(result: ListCargosResult) -> ListCargosResponse:
    return ListCargosResponse(cargos=[_cargo(c) for c in result.cargos])


def _list_locations_response(result: ListLocationsResult) -> ListLocationsResponse:
    return ListLocationsResponse(
        locations=[_location(location) for location in result.locations]
    )


def _empty_response(_result: object) -> EmptyResponse:
    return EmptyResponse()


def _cargo(cargo: CargoView) -> CargoSchema:
    return CargoSchema(
        tracking_id=cargo.tracking_id,
        origin=cargo.origin,
        destination=cargo.destination,
        arrival_deadline=cargo.arrival_deadline,
        misrouted=cargo.misrouted,
        routed=cargo.routed,
        legs=[_leg(leg) for leg in cargo.legs],
        events=[
            EventSchema(description=e.description, expected=e.expected)
            for e in cargo.events
        ],
    )


def _itinerary(itinerary: Itinerary) -> ItinerarySchema:
    return ItinerarySchema(legs=[_leg(leg) for leg in itinerary.legs])


def _leg(leg: Leg) -> LegSchema:
    return LegSchema(
        voyage_number=leg.voyage_number,
        load_location=leg.load_location,
        unload_location=leg.unload_location,
        load_time=leg.load_time,
        unload_time=leg.unload_time,
    )


def _location(location: Location) -> LocationSchema:
    return LocationSchema(locode=location.locode, name=location.name)
