"""
Tests for the booking API endpoints.

Requests go through the full application: routing, decoding, the
in-memory booking service and response encoding.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from shipping.core.config import Settings
from shipping.domain.cargo.errors import InvalidArgumentError
from shipping.domain.cargo.ports import BookingService
from shipping.main import create_app

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

ROUTE = {
    "legs": [
        {
            "voyage_number": "V100",
            "from": "USNYC",
            "to": "SESTO",
            "load_time": "2024-11-01T00:00:00Z",
            "unload_time": "2024-11-06T00:00:00Z",
        }
    ]
}


class TestBookAndLoad:
    """Tests for POST /booking/v1/cargos and GET /booking/v1/cargos/{id}."""

    def test_book_returns_tracking_id(self, client: TestClient) -> None:
        response = client.post(
            "/booking/v1/cargos",
            json={
                "origin": "USNYC",
                "destination": "SESTO",
                "arrival_deadline": "2024-12-01T00:00:00Z",
            },
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == JSON_CONTENT_TYPE
        body = response.json()
        assert set(body) == {"tracking_id"}
        assert body["tracking_id"]

    def test_load_booked_cargo(self, client: TestClient, booked_id: str) -> None:
        response = client.get(f"/booking/v1/cargos/{booked_id}")
        assert response.status_code == 200
        cargo = response.json()["cargo"]
        assert cargo["tracking_id"] == booked_id
        assert cargo["origin"] == "USNYC"
        assert cargo["destination"] == "SESTO"
        assert cargo["arrival_deadline"] == "2024-12-01T00:00:00Z"
        assert cargo["routed"] is False
        assert cargo["misrouted"] is False
        assert cargo["legs"] == []
        assert cargo["events"] == []
        assert "error" not in response.json()

    def test_unknown_cargo_is_404(self, client: TestClient) -> None:
        response = client.get("/booking/v1/cargos/doesnotexist")
        assert response.status_code == 404
        assert response.headers["content-type"] == JSON_CONTENT_TYPE
        assert response.json() == {"error": "unknown cargo"}

    def test_missing_fields_are_invalid_argument(self, client: TestClient) -> None:
        response = client.post("/booking/v1/cargos", json={"origin": "USNYC"})
        assert response.status_code == 400
        assert response.json() == {"error": "invalid argument"}

    def test_null_body_is_invalid_argument(self, client: TestClient) -> None:
        response = client.post("/booking/v1/cargos", content=b"null")
        assert response.status_code == 400
        assert response.json() == {"error": "invalid argument"}

    def test_null_origin_is_invalid_argument(self, client: TestClient) -> None:
        response = client.post(
            "/booking/v1/cargos",
            json={
                "origin": None,
                "destination": "SESTO",
                "arrival_deadline": "2024-12-01T00:00:00Z",
            },
        )
        assert response.status_code == 400
        assert response.json() == {"error": "invalid argument"}

    def test_malformed_json_is_500(self, client: TestClient) -> None:
        response = client.post("/booking/v1/cargos", content=b"{not json")
        assert response.status_code == 500
        assert set(response.json()) == {"error"}

    def test_malformed_json_is_400_when_configured(self) -> None:
        settings = Settings(rate_limit_enabled=False, client_errors_as_bad_request=True)
        client = TestClient(create_app(settings=settings))
        response = client.post("/booking/v1/cargos", content=b"{not json")
        assert response.status_code == 400


class TestListings:
    """Tests for GET /booking/v1/cargos and GET /booking/v1/locations."""

    def test_list_cargos_matches_booking(self, client: TestClient, booked_id: str) -> None:
        cargos = client.get("/booking/v1/cargos").json()["cargos"]
        assert [c["tracking_id"] for c in cargos] == [booked_id]
        assert cargos[0]["origin"] == "USNYC"
        assert cargos[0]["destination"] == "SESTO"

    def test_list_cargos_ignores_body(self, client: TestClient) -> None:
        response = client.request("GET", "/booking/v1/cargos", content=b"{")
        assert response.status_code == 200
        assert response.json() == {"cargos": []}

    def test_list_locations(self, client: TestClient) -> None:
        response = client.get("/booking/v1/locations")
        assert response.status_code == 200
        locations = response.json()["locations"]
        assert {"locode": "SESTO", "name": "Stockholm"} in locations
        assert len(locations) == 9


class TestRouting:
    """Tests for request_routes, assign_to_route and change_destination."""

    def test_request_routes_default_is_empty(self, client: TestClient, booked_id: str) -> None:
        response = client.get(f"/booking/v1/cargos/{booked_id}/request_routes")
        assert response.status_code == 200
        assert response.json() == {"routes": []}

    def test_assign_to_route(self, client: TestClient, booked_id: str) -> None:
        response = client.post(f"/booking/v1/cargos/{booked_id}/assign_to_route", json=ROUTE)
        assert response.status_code == 200
        assert response.json() == {}

        cargo = client.get(f"/booking/v1/cargos/{booked_id}").json()["cargo"]
        assert cargo["routed"] is True
        assert cargo["misrouted"] is False
        assert cargo["legs"] == ROUTE["legs"]

    def test_assign_empty_route_is_400(self, client: TestClient, booked_id: str) -> None:
        response = client.post(
            f"/booking/v1/cargos/{booked_id}/assign_to_route", json={"legs": []}
        )
        assert response.status_code == 400

    def test_assign_to_unknown_cargo_is_404(self, client: TestClient) -> None:
        response = client.post("/booking/v1/cargos/NOPE/assign_to_route", json=ROUTE)
        assert response.status_code == 404
        assert response.json() == {"error": "unknown cargo"}

    def test_change_destination_misroutes(self, client: TestClient, booked_id: str) -> None:
        client.post(f"/booking/v1/cargos/{booked_id}/assign_to_route", json=ROUTE)
        response = client.post(
            f"/booking/v1/cargos/{booked_id}/change_destination",
            json={"destination": "AUMEL"},
        )
        assert response.status_code == 200
        assert response.json() == {}

        cargo = client.get(f"/booking/v1/cargos/{booked_id}").json()["cargo"]
        assert cargo["destination"] == "AUMEL"
        assert cargo["misrouted"] is True

    def test_change_to_unknown_location_is_500(
        self, client: TestClient, booked_id: str
    ) -> None:
        response = client.post(
            f"/booking/v1/cargos/{booked_id}/change_destination",
            json={"destination": "XXXXX"},
        )
        assert response.status_code == 500
        assert response.json() == {"error": "unknown location"}


class TestUnmatchedRoutes:
    def test_unknown_path(self, client: TestClient) -> None:
        response = client.get("/booking/v1/nothing")
        assert response.status_code == 404
        assert response.json() == {"error": "bad route"}

    def test_wrong_method(self, client: TestClient) -> None:
        response = client.delete("/booking/v1/cargos")
        assert response.status_code == 405
        assert response.json() == {"error": "method not allowed"}

    def test_wrong_method_lists_allowed_methods(
        self, client: TestClient, booked_id: str
    ) -> None:
        response = client.get(f"/booking/v1/cargos/{booked_id}/assign_to_route")
        assert response.status_code == 405
        assert response.headers["allow"] == "POST"
        assert response.headers["content-type"] == JSON_CONTENT_TYPE


class TestWithServiceDouble:
    """The HTTP layer works against any BookingService implementation."""

    def _client(self, service: MagicMock) -> TestClient:
        settings = Settings(rate_limit_enabled=False)
        app = create_app(settings=settings, booking_service=service)
        return TestClient(app, raise_server_exceptions=False)

    def test_invalid_argument_from_service(self) -> None:
        service = MagicMock(spec=BookingService)
        service.change_destination.side_effect = InvalidArgumentError()

        response = self._client(service).post(
            "/booking/v1/cargos/ABC123/change_destination", json={"destination": ""}
        )

        service.change_destination.assert_called_once_with("ABC123", "")
        assert response.status_code == 400
        assert response.json() == {"error": "invalid argument"}

    def test_unexpected_error_is_500_with_message(self) -> None:
        service = MagicMock(spec=BookingService)
        service.cargos.side_effect = RuntimeError("storage offline")

        response = self._client(service).get("/booking/v1/cargos")

        assert response.status_code == 500
        assert response.json() == {"error": "storage offline"}
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["content-type"] == JSON_CONTENT_TYPE

    def test_decode_failure_never_reaches_service(self) -> None:
        service = MagicMock(spec=BookingService)

        response = self._client(service).post(
            "/booking/v1/cargos/ABC123/change_destination", content=b"["
        )

        assert response.status_code == 500
        service.change_destination.assert_not_called()
