"""HTTP boundary tests: status codes, wire format and the end-to-end scenario."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest


def create_place(client, name="Arena A", **extra):
    body = {"name": name, "address": "1 Main St", "city": "Springfield", "state": "SP"}
    body.update(extra)
    response = client.post("/places", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def event_body(place_id, name="Concert", start="2099-01-10T20:00:00Z", end="2099-01-10T23:00:00Z"):
    return {
        "placeId": place_id,
        "event": name,
        "type": "show",
        "email": "box@arena.test",
        "phone": "+55 11 5555-0000",
        "dateStart": start,
        "dateEnd": end,
    }


class TestPlacesApi:
    def test_create_returns_camel_case_with_children(self, client):
        place = create_place(client, gates=[{"name": "North"}], turnstiles=[{"name": "T1"}, {"name": "T2"}])

        assert place["name"] == "Arena A"
        assert "createdAt" in place
        assert place["gates"][0]["placeId"] == place["id"]
        assert [t["name"] for t in place["turnstiles"]] == ["T1", "T2"]

    def test_duplicate_name_is_conflict(self, client):
        create_place(client)
        response = client.post("/places", json={"name": "Arena A", "address": "x", "city": "y", "state": "z"})
        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    def test_update_round_trips_child_ids(self, client):
        place = create_place(client, gates=[{"name": "North"}, {"name": "South"}])
        north = place["gates"][0]

        response = client.put(f"/places/{place['id']}", json={"gates": [north, {"name": "West"}]})

        assert response.status_code == 200
        gates = response.json()["gates"]
        assert [g["name"] for g in gates] == ["North", "West"]
        assert gates[0]["id"] == north["id"]

    def test_get_missing_place_uses_lookup_status(self, client):
        assert client.get("/places/999").status_code == 400

    def test_update_missing_place_is_404(self, client):
        assert client.put("/places/999", json={"city": "x"}).status_code == 404

    def test_list_envelope(self, client):
        create_place(client, "B")
        create_place(client, "A")
        body = client.get("/places", params={"order": "name asc"}).json()
        assert [p["name"] for p in body["data"]] == ["A", "B"]
        assert body["total"] == 2
        assert body["totalPages"] == 1

    def test_bad_search_is_400(self, client):
        response = client.get("/places", params={"search": "nope:x"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"


class TestGatesApi:
    def test_crud(self, client):
        place = create_place(client)

        created = client.post("/gates", json={"name": "North", "placeId": place["id"]})
        assert created.status_code == 201
        gate_id = created.json()["id"]

        updated = client.put(f"/gates/{gate_id}", json={"name": "North Gate"})
        assert updated.json()["name"] == "North Gate"
        assert client.get(f"/gates/{gate_id}").json()["placeId"] == place["id"]
        assert [g["id"] for g in client.get("/gates").json()] == [gate_id]

        assert client.delete(f"/gates/{gate_id}").status_code == 200
        assert client.get(f"/gates/{gate_id}").status_code == 400

    def test_update_cannot_blank_name(self, client):
        place = create_place(client)
        gate_id = client.post("/gates", json={"name": "North", "placeId": place["id"]}).json()["id"]

        response = client.put(f"/gates/{gate_id}", json={"name": ""})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"
        assert client.get(f"/gates/{gate_id}").json()["name"] == "North"

    def test_create_for_missing_place_is_404(self, client):
        response = client.post("/turnstiles", json={"name": "T1", "placeId": 999})
        assert response.status_code == 404


class TestEventsApi:
    def test_create_and_find_with_place(self, client):
        place = create_place(client, gates=[{"name": "North"}])
        created = client.post("/events", json=event_body(place["id"]))
        assert created.status_code == 201, created.text
        event = created.json()
        assert event["dateStart"].startswith("2099-01-10T20:00:00")

        found = client.get(f"/events/{event['id']}").json()
        assert found["place"]["name"] == "Arena A"
        assert found["place"]["gates"][0]["name"] == "North"

    @pytest.mark.parametrize("start,end,code", [
        ("yesterday", "2099-01-10T23:00:00Z", "INVALID_DATE"),
        ("2000-01-10T20:00:00Z", "2099-01-10T23:00:00Z", "PAST_START"),
        ("2099-01-10T23:00:00Z", "2099-01-10T20:00:00Z", "INVERTED_RANGE"),
    ])
    def test_date_rejections_are_400(self, client, start, end, code):
        place = create_place(client)
        response = client.post("/events", json=event_body(place["id"], start=start, end=end))
        assert response.status_code == 400
        assert response.json()["code"] == code

    def test_missing_place_is_404(self, client):
        assert client.post("/events", json=event_body(999)).status_code == 404

    def test_get_missing_event_is_400(self, client):
        assert client.get("/events/12345").status_code == 400

    def test_update_missing_event_is_404(self, client):
        assert client.put("/events/12345", json={"phone": "1"}).status_code == 404

    def test_update_bad_ordering_is_400(self, client):
        place = create_place(client)
        event = client.post("/events", json=event_body(place["id"])).json()
        response = client.put(f"/events/{event['id']}", json={"dateEnd": "2099-01-09T00:00:00Z"})
        assert response.status_code == 400

    def test_list_and_delete(self, client):
        place = create_place(client)
        first = client.post("/events", json=event_body(place["id"], "B-side")).json()
        client.post("/events", json=event_body(place["id"], "A-side", "2099-02-01T10:00:00Z", "2099-02-01T11:00:00Z"))

        body = client.get("/events", params={"placeId": place["id"], "limit": 1}).json()
        assert [e["event"] for e in body["data"]] == ["A-side"]
        assert body["totalPages"] == 2

        deleted = client.delete(f"/events/{first['id']}")
        assert deleted.status_code == 200
        assert deleted.json()["event"] == "B-side"
        assert client.delete(f"/events/{first['id']}").status_code == 404

    def test_arena_scenario(self, client):
        arena = create_place(client, "Arena A", gates=[{"name": "North"}])
        other = create_place(client, "Arena B")

        concert = client.post("/events", json=event_body(arena["id"], "Concert"))
        assert concert.status_code == 201

        overlapping = client.post("/events", json=event_body(
            arena["id"], "Concert2", "2099-01-10T22:00:00Z", "2099-01-11T01:00:00Z"))
        assert overlapping.status_code == 409

        same_name = client.post("/events", json=event_body(other["id"], "Concert"))
        assert same_name.status_code == 409
        assert same_name.json()["detail"] != overlapping.json()["detail"]

        assert client.delete(f"/places/{arena['id']}").status_code == 409
        client.delete(f"/events/{concert.json()['id']}")
        assert client.delete(f"/places/{arena['id']}").status_code == 200
        assert client.get("/gates").json() == []


class TestHealth:
    def test_database_ok(self, client):
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"
