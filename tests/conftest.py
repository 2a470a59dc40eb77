import pytest
from fastapi.testclient import TestClient

from room_reservations.app.core.config import Settings
from room_reservations.app.main import create_app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def app(data_file):
    return create_app(Settings(data_file=str(data_file)))


@pytest.fixture
def client(app):
    """A client for a fresh application backed by an empty temporary document."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_reservation(client):
    def _make(room="A1", date="2025-12-19", time="10:00", owner="Maria"):
        response = client.post(
            "/api/reservations",
            json={"room": room, "date": date, "time": time, "owner": owner},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make
