"""Tests for the `/items` endpoints and HTTP error mapping."""

from pymongo.errors import AutoReconnect


def test_list_items_empty(client):
    resp = client.get("/items")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_item(client, collection):
    resp = client.post("/items", params={"name": "milk"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "milk"
    assert body["id"] == str(collection.docs[0]["_id"])
    assert collection.docs[0]["name"] == "milk"


def test_create_then_list_in_insertion_order(client):
    for name in ["milk", "eggs", "bread"]:
        assert client.post("/items", params={"name": name}).status_code == 201

    resp = client.get("/items")
    assert resp.status_code == 200
    items = resp.json()
    assert [item["name"] for item in items] == ["milk", "eggs", "bread"]
    assert len({item["id"] for item in items}) == 3


def test_create_item_strips_whitespace(client, collection):
    resp = client.post("/items", params={"name": "  coffee  "})
    assert resp.status_code == 201
    assert resp.json()["name"] == "coffee"
    assert collection.docs[0]["name"] == "coffee"


def test_create_item_requires_name(client, collection):
    resp = client.post("/items")
    assert resp.status_code == 422
    assert collection.docs == []


def test_create_item_rejects_blank_name(client, collection):
    resp = client.post("/items", params={"name": "   "})
    assert resp.status_code == 422
    assert resp.json() == {"ok": False, "error": "name must not be blank"}
    assert collection.docs == []


def test_create_item_rejects_long_name(client, collection):
    resp = client.post("/items", params={"name": "x" * 201})
    assert resp.status_code == 422
    assert resp.json() == {"ok": False, "error": "name must be at most 200 characters"}

    resp = client.post("/items", params={"name": " " + "x" * 201 + " "})
    assert resp.status_code == 422
    assert collection.docs == []


def test_create_item_length_limit_applies_after_stripping(client, collection):
    """Padding does not count against the length limit."""
    name = "x" * 199
    resp = client.post("/items", params={"name": "  " + name})
    assert resp.status_code == 201
    assert resp.json()["name"] == name

    resp = client.post("/items", params={"name": "  " + "y" * 200 + "  "})
    assert resp.status_code == 201
    assert len(collection.docs) == 2


def test_database_error_maps_to_500(client, collection):
    collection.error = AutoReconnect("connection reset")

    for resp in (client.get("/items"), client.post("/items", params={"name": "milk"})):
        assert resp.status_code == 500
        body = resp.json()
        assert body["ok"] is False
        assert "connection reset" in body["error"]


def test_unexpected_error_maps_to_500(client, collection):
    collection.error = RuntimeError("boom")

    resp = client.get("/items")
    assert resp.status_code == 500
    assert resp.json() == {"ok": False, "error": "internal server error"}


def test_unknown_route_is_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"ok": False, "error": "Not Found"}


def test_wrong_method_is_405(client):
    resp = client.delete("/items")
    assert resp.status_code == 405
    assert resp.json()["ok"] is False
