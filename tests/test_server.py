import json

import pytest

from l2utils.server import CalendarServer


def body(**fields):
    data = {"event_id": 1, "user_id": 3, "name": "n", "description": "d", "date": "2019-09-09"}
    data.update(fields)
    return json.dumps(data).encode("utf-8")


@pytest.fixture
def server():
    return CalendarServer()


def test_create_event(server):
    status, payload = server.handle("POST", "/create_event", "", body())
    assert status == 200
    assert payload["result"] == "Event is created"
    assert payload["events"] == [json.loads(body())]


def test_create_duplicate_is_503(server):
    server.handle("POST", "/create_event", "", body())
    status, payload = server.handle("POST", "/create_event", "", body())
    assert status == 503
    assert payload == {"error": "event already exist"}


@pytest.mark.parametrize("raw", [b"", b"{not json", b'{"user_id": "3"}', b'{"date": "09-09-2019"}'])
def test_bad_body_is_400(server, raw):
    status, payload = server.handle("POST", "/create_event", "", raw)
    assert status == 400
    assert "error" in payload and payload["error"]


def test_update_event(server):
    server.handle("POST", "/create_event", "", body())
    status, payload = server.handle("POST", "/update_event", "", body(name="renamed"))
    assert status == 200
    assert payload["result"] == "Event is updated"
    _, listing = server.handle("GET", "/events_for_day", "user_id=3&date=2019-09-09")
    assert [e["name"] for e in listing["events"]] == ["renamed"]


def test_update_unknown_user_is_503(server):
    status, payload = server.handle("POST", "/update_event", "", body())
    assert (status, payload) == (503, {"error": "user does not find"})


def test_delete_event(server):
    server.handle("POST", "/create_event", "", body())
    status, payload = server.handle("POST", "/delete_event", "", b'{"user_id": 3, "event_id": 1}')
    assert status == 200
    assert payload["result"] == "Event has been deleted"
    assert payload["events"][0]["name"] == "n"
    status, payload = server.handle("POST", "/delete_event", "", b'{"user_id": 3, "event_id": 1}')
    assert (status, payload) == (503, {"error": "event does not exist"})


def test_listings(server):
    server.handle("POST", "/create_event", "", body(event_id=1, date="2019-09-09"))
    server.handle("POST", "/create_event", "", body(event_id=2, date="2019-09-20"))
    _, day = server.handle("GET", "/events_for_day", "user_id=3&date=2019-09-09")
    _, week = server.handle("GET", "/events_for_week", "user_id=3&date=2019-09-11")
    _, month = server.handle("GET", "/events_for_month", "user_id=3&date=2019-09-01")
    assert day["result"] == "Events foud"
    assert [e["event_id"] for e in day["events"]] == [1]
    assert [e["event_id"] for e in week["events"]] == [1]
    assert [e["event_id"] for e in month["events"]] == [1, 2]


@pytest.mark.parametrize(
    "query",
    ["user_id=x&date=2019-09-09", "date=2019-09-09", "user_id=3&date=2019-9-9", "user_id=3"],
)
def test_bad_query_is_400(server, query):
    status, payload = server.handle("GET", "/events_for_day", query)
    assert status == 400
    assert payload["error"]


def test_unknown_user_status_per_listing(server):
    query = "user_id=9&date=2019-09-09"
    assert server.handle("GET", "/events_for_day", query)[0] == 503
    assert server.handle("GET", "/events_for_week", query)[0] == 503
    status, payload = server.handle("GET", "/events_for_month", query)
    assert (status, payload) == (400, {"error": "user does not exist"})


def test_unknown_path_is_404(server):
    assert server.handle("GET", "/nowhere") == (404, None)


def test_body_as_text_is_accepted(server):
    status, _ = server.handle("POST", "/create_event", "", body().decode("utf-8"))
    assert status == 200