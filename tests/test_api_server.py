"""
Tests de la API REST (FastAPI TestClient + repositorio falso)
"""

import pytest
from fastapi.testclient import TestClient

from conftest import FakeTransport, envelope
from tennis_tracker.api.api_server import app, get_repository
from tennis_tracker.exceptions import (
    DecodingError,
    HTTPStatusError,
    InvalidURLError,
    NetworkError,
)
from tennis_tracker.services.tennis_repository import TennisRepository


class FailingRepository:
    def __init__(self, error):
        self.error = error

    def get_fixtures(self, **filters):
        raise self.error


@pytest.fixture
def use_repository():
    def _use(repository):
        app.dependency_overrides[get_repository] = lambda: repository
        return TestClient(app)

    yield _use
    app.dependency_overrides.clear()


def test_health():
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("ok", "degraded")
    assert "api_key_configured" in data


def test_fixtures_endpoint(use_repository, fixture_record):
    transport = FakeTransport(envelope([fixture_record]))
    client = use_repository(TennisRepository(transport))

    response = client.get("/fixtures", params={"date_start": "2024-07-14", "player_key": "2382"})

    assert response.status_code == 200
    matches = response.json()
    assert matches[0]["key"] == "11976653"
    assert matches[0]["first_player"]["name"] == "C. Alcaraz"
    assert [s["number"] for s in matches[0]["sets"]] == ["1", "2", "3"]
    assert transport.calls == [("get_fixtures", {"date_start": "2024-07-14", "player_key": "2382"})]


def test_livescore_endpoint(use_repository, live_record):
    client = use_repository(TennisRepository(FakeTransport(envelope([live_record]))))

    response = client.get("/livescore")

    assert response.status_code == 200
    match = response.json()[0]
    assert match["is_live"] is True
    assert match["sets"][1]["games"][1]["points"][2]["is_break_point"] is True


def test_standings_endpoint_sends_uppercase_table(use_repository, standings_records):
    transport = FakeTransport(envelope(standings_records))
    client = use_repository(TennisRepository(transport))

    response = client.get("/standings", params={"event_type": "wta"})

    assert response.status_code == 200
    assert len(response.json()) == 2
    assert transport.calls == [("get_standings", {"event_type": "WTA"})]


def test_standings_rejects_unknown_table(use_repository):
    client = use_repository(TennisRepository(FakeTransport(envelope([]))))

    assert client.get("/standings", params={"event_type": "itf"}).status_code == 422


def test_events_and_players_endpoints(use_repository, player_record):
    client = use_repository(TennisRepository(FakeTransport(envelope([player_record]))))

    response = client.get("/players", params={"player_key": "2382"})

    assert response.status_code == 200
    assert response.json()[0]["full_name"] == "Carlos Alcaraz"


def test_no_data_is_an_empty_list(use_repository):
    client = use_repository(TennisRepository(FakeTransport({"error": "1", "result": [{"msg": "No events"}]})))

    response = client.get("/events")

    assert response.status_code == 200
    assert response.json() == []


def test_decoding_error_maps_to_502(use_repository):
    client = use_repository(FailingRepository(DecodingError("event_key")))

    response = client.get("/fixtures")

    assert response.status_code == 502
    assert response.json()["error"] == "decoding"
    assert response.json()["field"] == "event_key"


@pytest.mark.parametrize("error, status_code", [
    (HTTPStatusError(500), 502),
    (NetworkError(OSError("timeout")), 503),
    (InvalidURLError("bad"), 503),
])
def test_transport_errors_map_to_status(use_repository, error, status_code):
    client = use_repository(FailingRepository(error))

    response = client.get("/fixtures")

    assert response.status_code == status_code
    assert response.json()["error"] == "transport"
