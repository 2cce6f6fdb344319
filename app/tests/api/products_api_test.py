from datetime import datetime, timezone

from fastapi.testclient import TestClient
from pydantic import TypeAdapter
from sqlalchemy import event

from app.main import app
from app.models import Product

_datetime = TypeAdapter(datetime)

WIDGET = {"name": "Widget", "price": 9.99}


def _parse(value: str) -> datetime:
    return _datetime.validate_python(value)


def _create(client, payload=None) -> dict:
    response = client.post("/api/products", json=payload or WIDGET)
    assert response.status_code == 201
    return response.json()


def test_create_product_returns_created_record_with_location(client):
    before = datetime.now(timezone.utc)

    response = client.post("/api/products", json=WIDGET)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Widget"
    assert body["price"] == 9.99
    assert body["description"] is None
    assert body["updatedAt"] is None
    assert _parse(body["createdAt"]) >= before
    assert response.headers["location"].endswith(f"/api/products/{body['id']}")


def test_created_ids_are_unique(client):
    ids = {_create(client)["id"] for _ in range(3)}

    assert len(ids) == 3


def test_list_products(client):
    assert client.get("/api/products").json() == []

    first = _create(client)
    second = _create(client, {"name": "Gadget", "description": "Shiny", "price": 20})

    response = client.get("/api/products")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [first["id"], second["id"]]


def test_get_product(client):
    created = _create(client)

    response = client.get(f"/api/products/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_product_returns_404(client):
    response = client.get("/api/products/999")

    assert response.status_code == 404
    assert response.json()["code"] == 404


def test_create_product_rejects_invalid_payloads(client):
    invalid_payloads = [
        {"price": 1},
        {"name": "Widget"},
        {"name": "Widget", "price": 0},
        {"name": "Widget", "price": -3},
        {"name": "x" * 101, "price": 1},
        {"name": "Widget", "description": "d" * 501, "price": 1},
    ]

    for payload in invalid_payloads:
        response = client.post("/api/products", json=payload)
        assert response.status_code == 400, payload

    assert client.get("/api/products").json() == []


def test_replace_product_refreshes_updated_at(client):
    created = _create(client)
    product_id = created["id"]

    response = client.put(
        f"/api/products/{product_id}",
        json={"id": product_id, "name": "Widget v2", "description": "Improved", "price": 12.5},
    )

    assert response.status_code == 204
    assert response.content == b""
    first = client.get(f"/api/products/{product_id}").json()
    assert first["name"] == "Widget v2"
    assert first["description"] == "Improved"
    assert first["price"] == 12.5
    assert first["createdAt"] == created["createdAt"]
    assert first["updatedAt"] is not None

    client.put(f"/api/products/{product_id}", json={"name": "Widget v3", "price": 13})
    second = client.get(f"/api/products/{product_id}").json()
    assert second["description"] is None
    assert _parse(second["updatedAt"]) > _parse(first["updatedAt"])


def test_replace_with_mismatched_id_returns_400_and_keeps_record(client):
    created = _create(client)
    other_id = created["id"] + 2

    response = client.put(
        f"/api/products/{created['id']}",
        json={"id": other_id, "name": "Changed", "price": 1},
    )

    assert response.status_code == 400
    assert client.get(f"/api/products/{created['id']}").json() == created


def test_replace_unknown_product_returns_404(client):
    response = client.put("/api/products/999", json={"name": "Ghost", "price": 1})

    assert response.status_code == 404


def test_replace_conflict_is_a_server_error(client, session_factory):
    product_id = _create(client)["id"]
    fired = []

    def concurrent_update(session, flush_context, instances):
        if fired:
            return
        fired.append(True)
        other = session_factory()
        try:
            other.get(Product, product_id).name = "Changed elsewhere"
            other.commit()
        finally:
            other.close()

    event.listen(session_factory, "before_flush", concurrent_update)
    try:
        with TestClient(app, raise_server_exceptions=False) as raw_client:
            response = raw_client.put(f"/api/products/{product_id}", json={"name": "Mine", "price": 1})
    finally:
        event.remove(session_factory, "before_flush", concurrent_update)

    assert response.status_code == 500
    assert client.get(f"/api/products/{product_id}").json()["name"] == "Changed elsewhere"


def test_delete_product_then_delete_again(client):
    product_id = _create(client)["id"]

    first = client.delete(f"/api/products/{product_id}")
    second = client.delete(f"/api/products/{product_id}")

    assert first.status_code == 204
    assert second.status_code == 404
    assert client.get(f"/api/products/{product_id}").status_code == 404


def test_invalid_path_ids_return_400(client):
    assert client.get("/api/products/0").status_code == 400
    assert client.get("/api/products/abc").status_code == 400
    assert client.delete("/api/products/-1").status_code == 400
    assert client.get("/api/products/99999999999999999999").status_code == 400
    assert client.put("/api/products/99999999999999999999", json=WIDGET).status_code == 400
    assert client.delete("/api/products/99999999999999999999").status_code == 400


def test_largest_valid_id_is_not_found(client):
    assert client.get(f"/api/products/{2 ** 31 - 1}").status_code == 404
