"""
Shared fixtures.

Every test gets a freshly composed application backed by its own
in-memory repositories, so no state leaks between tests.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from shipping.core.config import Settings
from shipping.main import create_app

DEADLINE = datetime(2024, 12, 1, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(rate_limit_enabled=False, log_level="WARNING")


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings=settings))


@pytest.fixture
def booked_id(client: TestClient) -> str:
    """Book a USNYC -> SESTO cargo and return its tracking id."""
    response = client.post(
        "/booking/v1/cargos",
        json={
            "origin": "USNYC",
            "destination": "SESTO",
            "arrival_deadline": "2024-12-01T00:00:00Z",
        },
    )
    assert response.status_code == 200
    return response.json()["tracking_id"]
