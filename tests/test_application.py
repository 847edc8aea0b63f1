"""
Tests for the application layer (use cases).

Use cases run against mocked service ports. Each test checks that the
command reaches the right service method and that domain errors come
back inside the result envelope.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from shipping.application.booking.assign_to_route import AssignToRouteUseCase
from shipping.application.booking.book_cargo import BookCargoUseCase
from shipping.application.booking.change_destination import ChangeDestinationUseCase
from shipping.application.booking.dtos import (
    AssignToRouteCommand,
    BookCargoCommand,
    ChangeDestinationCommand,
    ListCargosCommand,
    ListLocationsCommand,
    LoadCargoCommand,
    RequestRoutesCommand,
)
from shipping.application.booking.list_cargos import ListCargosUseCase
from shipping.application.booking.list_locations import ListLocationsUseCase
from shipping.application.booking.load_cargo import LoadCargoUseCase
from shipping.application.booking.request_routes import RequestRoutesUseCase
from shipping.application.handling.dtos import RegisterIncidentCommand
from shipping.application.handling.register_incident import RegisterIncidentUseCase
from shipping.domain.cargo.entities import (
    HandlingEventType,
    Itinerary,
    Location,
    TrackingID,
    UNLocode,
    VoyageNumber,
)
from shipping.domain.cargo.errors import (
    ErrorKind,
    InvalidArgumentError,
    UnknownCargoError,
    UnknownLocationError,
)
from shipping.domain.cargo.ports import BookingService, HandlingService

DEADLINE = datetime(2024, 12, 1, tzinfo=timezone.utc)


@pytest.fixture
def booking_service() -> MagicMock:
    return MagicMock(spec=BookingService)


class TestBookCargoUseCase:
    """Tests for BookCargoUseCase."""

    def test_returns_tracking_id(self, booking_service: MagicMock) -> None:
        booking_service.book_new_cargo.return_value = TrackingID("ABC123")
        command = BookCargoCommand(UNLocode("USNYC"), UNLocode("SESTO"), DEADLINE)

        result = BookCargoUseCase(booking_service).execute(command)

        booking_service.book_new_cargo.assert_called_once_with(
            "USNYC", "SESTO", DEADLINE
        )
        assert result.tracking_id == "ABC123"
        assert result.err is None

    def test_domain_error_is_carried_in_result(self, booking_service: MagicMock) -> None:
        booking_service.book_new_cargo.side_effect = InvalidArgumentError()
        command = BookCargoCommand(UNLocode(""), UNLocode("SESTO"), DEADLINE)

        result = BookCargoUseCase(booking_service).execute(command)

        assert result.err.kind is ErrorKind.INVALID_ARGUMENT
        assert result.tracking_id is None

    def test_unexpected_error_is_carried_as_internal(
        self, booking_service: MagicMock
    ) -> None:
        booking_service.book_new_cargo.side_effect = RuntimeError("boom")
        command = BookCargoCommand(UNLocode("USNYC"), UNLocode("SESTO"), DEADLINE)

        result = BookCargoUseCase(booking_service).execute(command)

        assert result.err.kind is ErrorKind.INTERNAL
        assert result.err.message == "boom"
        assert result.tracking_id is None


class TestCargoUseCases:
    """Tests for the use cases addressing a single cargo."""

    def test_load_unknown_cargo(self, booking_service: MagicMock) -> None:
        booking_service.load_cargo.side_effect = UnknownCargoError("NOPE")

        result = LoadCargoUseCase(booking_service).execute(
            LoadCargoCommand(id=TrackingID("NOPE"))
        )

        booking_service.load_cargo.assert_called_once_with("NOPE")
        assert result.err.kind is ErrorKind.UNKNOWN_CARGO
        assert result.cargo is None

    def test_request_routes(self, booking_service: MagicMock) -> None:
        booking_service.request_possible_routes_for_cargo.return_value = [Itinerary()]

        result = RequestRoutesUseCase(booking_service).execute(
            RequestRoutesCommand(id=TrackingID("ABC123"))
        )

        assert result.routes == (Itinerary(),)
        assert result.err is None

    def test_assign_to_route(self, booking_service: MagicMock) -> None:
        itinerary = Itinerary()
        result = AssignToRouteUseCase(booking_service).execute(
            AssignToRouteCommand(id=TrackingID("ABC123"), itinerary=itinerary)
        )

        booking_service.assign_cargo_to_route.assert_called_once_with(
            "ABC123", itinerary
        )
        assert result.err is None

    def test_change_destination_error(self, booking_service: MagicMock) -> None:
        booking_service.change_destination.side_effect = UnknownLocationError("XXXXX")

        result = ChangeDestinationUseCase(booking_service).execute(
            ChangeDestinationCommand(id=TrackingID("ABC123"), destination=UNLocode("XXXXX"))
        )

        booking_service.change_destination.assert_called_once_with("ABC123", "XXXXX")
        assert result.err.kind is ErrorKind.UNKNOWN_LOCATION


class TestListUseCases:
    def test_list_cargos(self, booking_service: MagicMock) -> None:
        booking_service.cargos.return_value = []
        result = ListCargosUseCase(booking_service).execute(ListCargosCommand())
        assert result.cargos == ()
        assert result.err is None

    def test_list_locations(self, booking_service: MagicMock) -> None:
        stockholm = Location(UNLocode("SESTO"), "Stockholm")
        booking_service.locations.return_value = [stockholm]
        result = ListLocationsUseCase(booking_service).execute(ListLocationsCommand())
        assert result.locations == (stockholm,)


class TestRegisterIncidentUseCase:
    """Tests for RegisterIncidentUseCase."""

    def _command(self) -> RegisterIncidentCommand:
        return RegisterIncidentCommand(
            id=TrackingID("ABC123"),
            location=UNLocode("USNYC"),
            voyage=VoyageNumber("V100"),
            event_type=HandlingEventType.LOAD,
            completion_time=DEADLINE,
        )

    def test_fields_map_to_service_arguments(self) -> None:
        handling_service = MagicMock(spec=HandlingService)

        result = RegisterIncidentUseCase(handling_service).execute(self._command())

        handling_service.register_handling_event.assert_called_once_with(
            DEADLINE, "ABC123", "V100", "USNYC", HandlingEventType.LOAD
        )
        assert result.err is None

    def test_domain_error_is_carried_in_result(self) -> None:
        handling_service = MagicMock(spec=HandlingService)
        handling_service.register_handling_event.side_effect = UnknownCargoError()

        result = RegisterIncidentUseCase(handling_service).execute(self._command())

        assert result.err.message == "unknown cargo"

    def test_unexpected_error_is_carried_as_internal(self) -> None:
        handling_service = MagicMock(spec=HandlingService)
        handling_service.register_handling_event.side_effect = KeyError()

        result = RegisterIncidentUseCase(handling_service).execute(self._command())

        assert result.err.kind is ErrorKind.INTERNAL
        assert result.err.message == "KeyError"


class TestUnexpectedErrors:
    """Every booking use case returns an envelope, whatever the service raises."""

    @pytest.mark.parametrize(
        "use_case_cls, method, command",
        [
            (ListCargosUseCase, "cargos", ListCargosCommand()),
            (ListLocationsUseCase, "locations", ListLocationsCommand()),
            (LoadCargoUseCase, "load_cargo", LoadCargoCommand(id=TrackingID("A1"))),
            (
                RequestRoutesUseCase,
                "request_possible_routes_for_cargo",
                RequestRoutesCommand(id=TrackingID("A1")),
            ),
            (
                AssignToRouteUseCase,
                "assign_cargo_to_route",
                AssignToRouteCommand(id=TrackingID("A1"), itinerary=Itinerary()),
            ),
            (
                ChangeDestinationUseCase,
                "change_destination",
                ChangeDestinationCommand(id=TrackingID("A1"), destination=UNLocode("SESTO")),
            ),
        ],
    )
    def test_error_lands_in_envelope(
        self, booking_service: MagicMock, use_case_cls, method, command
    ) -> None:
        getattr(booking_service, method).side_effect = RuntimeError("storage offline")

        result = use_case_cls(booking_service).execute(command)

        assert result.err.kind is ErrorKind.INTERNAL
        assert result.err.message == "storage offline"
