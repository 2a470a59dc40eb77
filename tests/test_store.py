import json

import pytest

from room_reservations.app.core.store import ReservationStore, resolve_data_path

RECORD = {
    "id": 1734600000000,
    "room": "A1",
    "date": "2025-12-19",
    "time": "10:00",
    "owner": "Maria",
    "createdAt": "2025-12-19T09:00:00.000Z",
    "updatedAt": None,
}


def test_missing_file_loads_empty(tmp_path):
    store = ReservationStore(tmp_path / "db.json")
    assert store.load() == []
    assert not (tmp_path / "db.json").exists()


@pytest.mark.parametrize("content", ["", "   \n", "{}", '{"reservations": null}', "[]"])
def test_empty_or_shapeless_document_loads_empty(tmp_path, content):
    path = tmp_path / "db.json"
    path.write_text(content, encoding="utf-8")
    assert ReservationStore(path).load() == []


def test_malformed_document_raises(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        ReservationStore(path).load()


def test_persist_writes_expected_layout(tmp_path):
    path = tmp_path / "nested" / "db.json"
    store = ReservationStore(path)
    store.load()
    store.reservations.append(dict(RECORD))
    store.persist()

    assert json.loads(path.read_text(encoding="utf-8")) == {"reservations": [RECORD]}


def test_round_trip_keeps_order_and_unknown_keys(tmp_path):
    path = tmp_path / "db.json"
    records = [dict(RECORD, id=3, note="keep me"), dict(RECORD, id=1), dict(RECORD, id=2)]
    path.write_text(json.dumps({"reservations": records}), encoding="utf-8")

    store = ReservationStore(path)
    store.load()
    store.persist()

    assert ReservationStore(path).load() == records


def test_persist_leaves_no_temporary_files(tmp_path):
    store = ReservationStore(tmp_path / "db.json")
    store.load()
    store.persist()
    assert [p.name for p in tmp_path.iterdir()] == ["db.json"]


def test_failed_write_keeps_previous_document(tmp_path, monkeypatch):
    path = tmp_path / "db.json"
    store = ReservationStore(path)
    store.reservations = [dict(RECORD)]
    store.persist()
    before = path.read_text(encoding="utf-8")

    def boom(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("room_reservations.app.core.store.os.replace", boom)
    store.reservations = []
    with pytest.raises(OSError):
        store.persist()

    assert path.read_text(encoding="utf-8") == before
    assert [p.name for p in tmp_path.iterdir()] == ["db.json"]


def test_load_always_reads_fresh(tmp_path):
    path = tmp_path / "db.json"
    store = ReservationStore(path)
    store.load()
    path.write_text(json.dumps({"reservations": [RECORD]}), encoding="utf-8")
    assert store.load() == [RECORD]


def test_resolve_data_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_data_path("db.json") == (tmp_path / "db.json").resolve()
    absolute = tmp_path / "other.json"
    assert resolve_data_path(str(absolute)) == absolute
