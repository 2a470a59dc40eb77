import json

import pytest
import requests

from room_reservations_client import ReservationsClient


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self.content = b"" if body is None else json.dumps(body).encode()
        self.text = self.content.decode()

    def json(self):
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def test_list_sends_only_non_empty_filters():
    session = FakeSession(FakeResponse(200, [{"id": 1}]))
    client = ReservationsClient("http://localhost:3000/", session=session)

    data, error = client.list_reservations(room="lab", date="")

    assert (data, error) == ([{"id": 1}], None)
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://localhost:3000/api/reservations"
    assert call["params"] == {"room": "lab"}


def test_create_returns_created_record():
    record = {"id": 7, "room": "A1"}
    session = FakeSession(FakeResponse(201, record))
    client = ReservationsClient("http://svc", session=session)

    payload = {"room": "A1", "date": "2025-12-19", "time": "10:00", "owner": "Maria"}
    assert client.create_reservation(payload) == (record, None)
    assert session.calls[0]["json"] == payload


def test_server_error_message_is_reported():
    session = FakeSession(FakeResponse(409, {"error": "Conflict: taken"}))
    client = ReservationsClient("http://svc", session=session)

    data, error = client.update_reservation(7, {"room": "A1"})

    assert data is None
    assert error == {"status_code": 409, "message": "Conflict: taken"}
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://svc/api/reservations/7"


def test_delete():
    session = FakeSession(FakeResponse(204), FakeResponse(404, {"error": "Reservation not found."}))
    client = ReservationsClient("http://svc", session=session)

    assert client.delete_reservation(7) == (True, None)
    assert client.delete_reservation(7) == (False, {"status_code": 404, "message": "Reservation not found."})


def test_network_failure():
    session = FakeSession(requests.ConnectionError("refused"))
    client = ReservationsClient("http://svc", session=session)

    data, error = client.list_reservations()

    assert data == []
    assert error == {"status_code": None, "message": "refused"}


@pytest.mark.parametrize("status", [500, 502])
def test_non_json_error_body_falls_back_to_text(status):
    response = FakeResponse(status)
    response.content = b"Bad gateway"
    response.text = "Bad gateway"
    client = ReservationsClient("http://svc", session=FakeSession(response))

    _, error = client.list_reservations()

    assert error == {"status_code": status, "message": "Bad gateway"}
